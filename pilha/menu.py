"""Interactive text menus for the linked list, queue and stack."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator
from typing import TextIO

from pilha.circular_queue import CircularQueue
from pilha.linked_list import LinkedList
from pilha.stack import Stack

__all__ = ["linked_list_menu", "queue_menu", "stack_menu", "main"]

_LIST_OPTIONS = (
    "\nOPÇÕES\n"
    "1 - ADICIONAR ELEMENTO\n"
    "2 - REMOVER ELEMENTO\n"
    "3 - EXIBIR ELEMENTO POR ÍNDICE\n"
    "4 - EXIBIR TODOS ELEMENTOS\n"
    "5 - TAMANHO DA LISTA\n"
    "6 - PRIMEIRO ELEMENTO\n"
    "7 - ÚLTIMO ELEMENTO\n"
    "8 - SAIR\n"
    "Escolha: "
)


def _integers(stream: TextIO) -> Iterator[int]:
    """Yield whitespace-separated integers until input ends or is not a number."""
    for line in stream:
        for word in line.split():
            try:
                yield int(word)
            except ValueError:
                return


def linked_list_menu(stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
    """Run the linked list menu until the user chooses to leave."""
    stdin = stdin or sys.stdin
    out = (stdout or sys.stdout).write
    numbers = _integers(stdin)
    items = LinkedList()
    out("===== Vamos testar a LinkedList =====\n")

    while True:
        out(_LIST_OPTIONS)
        op = next(numbers, None)
        if op is None:
            return
        try:
            if op == 1:
                out("Valor a adicionar: ")
                value = next(numbers, None)
                out("Índice (ou -1 para final): ")
                index = next(numbers, None)
                if value is None or index is None:
                    return
                items.add(value, index)
                out("Elemento adicionado!\n")
            elif op == 2:
                out("Índice a remover (ou -1 para último): ")
                index = next(numbers, None)
                if index is None:
                    return
                items.remove(index)
                out("Elemento removido!\n")
            elif op == 3:
                out("Índice do elemento: ")
                index = next(numbers, None)
                if index is None:
                    return
                out(f"Elemento: {items.get(index)}\n")
            elif op == 4:
                out(items.render())
            elif op == 5:
                out(f"Tamanho: {len(items)}\n")
            elif op == 6:
                out(f"Primeiro: {items.first()}\n")
            elif op == 7:
                out(f"Último: {items.last()}\n")
            elif op == 8:
                out("Até mais!\n")
                return
            else:
                out("Opção inválida!\n")
        except IndexError as error:
            out(f"Erro: {error}\n")


def _container_menu(title, container, add, remove, peek, show_label, stdin, stdout):
    stdin = stdin or sys.stdin
    out = (stdout or sys.stdout).write
    numbers = _integers(stdin)
    out(f"====={title}=====\n")

    while True:
        out(
            "OPCOES\n"
            "1- ADICIONAR\n"
            "2- REMOVER\n"
            "3- PICO\n"
            f"4- EXIBIR {show_label}\n"
            "5- SAIR\n"
        )
        op = next(numbers, None)
        if op is None:
            return
        try:
            if op == 1:
                out("Adicionar numero\n")
                value = next(numbers, None)
                if value is None:
                    return
                add(value)
            elif op == 2:
                out(f"Elemento removido: {remove()}\n")
            elif op == 3:
                out(f"Pico: {peek()}\n")
            elif op == 4:
                out(container.render())
            elif op == 5:
                out("Até mais!\n")
                return
            else:
                out("Opção invalida\n")
        except (IndexError, OverflowError) as error:
            out(f"Erro: {error}\n")


def queue_menu(stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
    """Run the queue menu until the user chooses to leave."""
    queue = CircularQueue()
    _container_menu(
        "Vamos criar Filas", queue, queue.enqueue, queue.dequeue, queue.front,
        "FILA", stdin, stdout,
    )


def stack_menu(stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
    """Run the stack menu until the user chooses to leave."""
    stack = Stack()
    _container_menu(
        "Vamos criar Pilhas", stack, stack.push, stack.pop, stack.peek,
        "PILHA", stdin, stdout,
    )


def main(argv: list[str] | None = None) -> int:
    """Start the menu for the chosen structure (the linked list by default)."""
    parser = argparse.ArgumentParser(prog="pilha")
    parser.add_argument(
        "structure", nargs="?", default="list", choices=("list", "queue", "stack")
    )
    args = parser.parse_args(argv)
    menus = {"list": linked_list_menu, "queue": queue_menu, "stack": stack_menu}
    menus[args.structure](sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())