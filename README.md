# linkedkit

Small, generic containers built from linked nodes:

- `linkedkit.singly.SinglyLinkedList` and `linkedkit.doubly.DoublyLinkedList`,
  with insertion and deletion at the front, at the back and at a 1-based
  position
- `linkedkit.stack.Stack` (last in, first out)
- `linkedkit.fifo.Queue` (first in, first out)
- `linkedkit.arithmetic.Arithmetic`, a frozen dataclass holding two integers
  with `addition()` and `subtraction()`

Every container accepts an optional iterable of initial items, holds values
of any type, reports its size through `len()`, can be iterated, and has a
`render()` method that returns a printable picture of its contents.
`DoublyLinkedList` can also be iterated backwards with `reversed()`. The two
list classes compare equal when they hold the same values in the same order.

## Installation

```
pip install .
```

## Usage

```python
from linkedkit.arithmetic import Arithmetic
from linkedkit.singly import SinglyLinkedList
from linkedkit.doubly import DoublyLinkedList
from linkedkit.stack import Stack, EmptyStackError
from linkedkit.fifo import Queue, EmptyQueueError

pair = Arithmetic(11, 10)
print(pair.addition(), pair.subtraction())   # 21 1

items = SinglyLinkedList([11, 21, 51])
items.insert_last(101)
items.insert_at(105, 2)      # positions start at 1
items.delete_first()
print(list(items), len(items))
print(items.render())        # | 105 | -> | 21 | -> | 51 | -> | 101 | -> NULL

letters = DoublyLinkedList("abc")
print(list(reversed(letters)))
print(letters.render())      # NULL <=>| a |<=> | b |<=> | c |<=> NULL

stack = Stack()
stack.push("A")
stack.push("B")
print(stack.peek(), stack.pop(), len(stack))

queue = Queue([1.5, 2.5])
print(queue.dequeue())
```

## Errors

- `insert_at` raises `IndexError` unless `1 <= position <= len(list) + 1`;
  `delete_at` raises `IndexError` unless `1 <= position <= len(list)`.
- `delete_first` and `delete_last` return the removed value, or `None` when
  the list is empty (the list is left unchanged).
- `Stack.pop` and `Stack.peek` raise `EmptyStackError` on an empty stack.
- `Queue.dequeue` raises `EmptyQueueError` on an empty queue.

Both error classes are subclasses of `IndexError`.

## Commands

Print a scripted walk-through of the singly linked list, the doubly linked
list, the stack and the queue:

```
linkedkit-demo
```

The same trace is available from Python as
`linkedkit.demo.run_demo(out)`, which writes to any text stream
(standard output by default).

Start an interactive menu for a queue of integers, read from standard input.
Enter `1` and then a number to insert it, `2` to remove the front element,
`3` to display the queue, `4` to count its elements and `0` to exit. The
session also ends when the input runs out.

```
linkedkit-queue
```

From Python, `linkedkit.menu.run_menu(lines, out)` runs the same dialogue on
an iterable of input lines and returns the resulting `Queue`.

## Limits

Only linear lists are provided; there are no circular list types. Containers
live in memory only and are not saved anywhere.

## Running the tests

```
pip install .[test]
pytest
```