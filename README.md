# pilha

This package provides three small data structures. Each one has an interactive text menu.

## Stack

`pilha.stack.Stack(capacity=10)` is a LIFO stack.

- `push(x)` puts `x` on top. It raises `StackOverflowError` when the stack already holds `capacity` items.
- `pop()` removes and returns the top item.
- `peek()` returns the top item and leaves it in place.
- `pop()` and `peek()` raise `StackUnderflowError` when the stack is empty.
- `is_empty()`, `is_full()` and `len()` report how full the stack is.
- `render()` returns the contents drawn from top to base.

`StackUnderflowError` is a subclass of `IndexError`. `StackOverflowError` is a subclass of `OverflowError`.

A capacity that is not positive raises `ValueError`.

## Circular queue

`pilha.circular_queue.CircularQueue(capacity=5)` is a FIFO queue kept in a ring buffer.

- `enqueue(item)` adds an item. It raises `QueueFullError` when the queue is full.
- `dequeue()` removes and returns the front item.
- `front()` returns the front item and leaves it in place.
- `dequeue()` and `front()` raise `QueueEmptyError` when the queue is empty.
- `is_empty()`, `is_full()` and `len()` report how full the queue is.
- `render()` shows three things:
  - the raw buffer,
  - the start and end cursors, each as a count and as a position in the buffer,
  - the items currently queued.

`QueueEmptyError` is a subclass of `IndexError`. `QueueFullError` is a subclass of `OverflowError`.

A capacity that is not positive raises `ValueError`.

## Linked list

`pilha.linked_list.LinkedList` is a singly linked list with head and tail references. It has no size limit.

- `add(value, index=-1)` inserts `value` at `index`.
  - An `index` of `-1`, or one equal to the current length, appends.
  - An index below `-1` or above the length raises `IndexError`.
- `remove(index=-1)` deletes the element at `index`.
  - An `index` of `-1` removes the last element.
  - An index equal to the length also removes the last element.
  - An index below `-1` or above the length raises `IndexError`.
- `remove_head()` and `remove_tail()` delete the first and last element.
- `get(index)` returns the value at `index`.
  - An index equal to the length returns the last value.
  - A negative index returns the first value.
  - An index above the length raises `IndexError`.
- `first()` and `last()` return the first and last value.
- `len()` gives the number of elements. Iterating yields the values in order.
- `render()` returns each element with its index.

Reading from or removing from an empty list raises `EmptyListError`, which is a subclass of `IndexError`.

## Example

```python
from pilha.linked_list import LinkedList
from pilha.stack import Stack

items = LinkedList()
items.add(1, -1)
items.add(3, -1)
items.add(2, 1)
print(list(items))       # [1, 2, 3]

s = Stack()
s.push(7)
print(s.peek(), len(s))  # 7 1
```

## Interactive menus

After installation, start a menu with one of these commands:

```
pilha            # linked list (the default)
pilha list
pilha queue
pilha stack
```

The menus read whitespace-separated integers from standard input and write prompts and results to standard output.

- **Linked list menu:** options 1 to 7 add, remove, get by index, show all, show the length, show the first element and show the last element. Option 8 exits.
- **Queue and stack menus:** options 1 to 4 add, remove, peek and show the contents. Option 5 exits.

An error from an operation is printed as `Erro: <message>`, and the menu keeps running. The menu stops when input ends or when it reads something that is not an integer.

The same menus can be called from Python. Each takes an input stream and an output stream, which default to standard input and standard output:

- `pilha.menu.linked_list_menu`
- `pilha.menu.queue_menu`
- `pilha.menu.stack_menu`

The structures live only in memory. Nothing is saved between runs.

## Tests

```
pip install -e .[test]
pytest
```