import io

from pilha.menu import linked_list_menu, main, queue_menu, stack_menu


def test_list_add_and_first():
    out = io.StringIO()
    linked_list_menu(io.StringIO("1 5 -1\n6\n8\n"), out)
    output = out.getvalue()
    assert "Elemento adicionado!" in output
    assert "Primeiro: 5\n" in output
    assert output.endswith("Até mais!\n")


def test_list_invalid_index_reports_error():
    out = io.StringIO()
    linked_list_menu(io.StringIO("1 5 3\n5\n8\n"), out)
    output = out.getvalue()
    assert "Erro: Indice invalido" in output
    assert "Tamanho: 0\n" in output


def test_list_empty_errors_and_invalid_option():
    out = io.StringIO()
    linked_list_menu(io.StringIO("7\n9\n8\n"), out)
    output = out.getvalue()
    assert "Erro: List is empty" in output
    assert "Opção inválida!" in output


def test_list_display_and_get():
    out = io.StringIO()
    linked_list_menu(io.StringIO("1 3 -1\n1 4 -1\n3 1\n4\n8\n"), out)
    output = out.getvalue()
    assert "Elemento: 4\n" in output
    assert "0 - (3)\n1 - (4)\n" in output


def test_list_stops_at_end_of_input():
    out = io.StringIO()
    linked_list_menu(io.StringIO("5\n"), out)
    output = out.getvalue()
    assert "Tamanho: 0\n" in output
    assert "Até mais!" not in output


def test_queue_menu():
    out = io.StringIO()
    queue_menu(io.StringIO("1 4\n1 6\n3\n2\n5\n"), out)
    output = out.getvalue()
    assert "Pico: 4\n" in output
    assert "Elemento removido: 4\n" in output
    assert output.endswith("Até mais!\n")


def test_stack_menu_underflow_and_peek():
    out = io.StringIO()
    stack_menu(io.StringIO("2\n1 9\n3\n5\n"), out)
    output = out.getvalue()
    assert "Erro: Stack is empty" in output
    assert "Pico: 9\n" in output


def test_main_runs_stack_menu(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("1 2\n2\n5\n"))
    out = io.StringIO()
    monkeypatch.setattr("sys.stdout", out)
    assert main(["stack"]) == 0
    assert "Elemento removido: 2\n" in out.getvalue()