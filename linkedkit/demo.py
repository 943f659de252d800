"""Scripted walk-through of the list, stack and queue containers."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence, TextIO

from linkedkit.doubly import DoublyLinkedList
from linkedkit.fifo import Queue
from linkedkit.singly import SinglyLinkedList
from linkedkit.stack import Stack


def _number(value: object) -> str:
    """Format a value the way a default-precision stream prints it."""
    if isinstance(value, float):
        return format(value, "g")
    return str(value)


def _singly_section(out: TextIO) -> None:
    out.write("Object of SinglyLL gets created.\n")
    numbers: SinglyLinkedList[int] = SinglyLinkedList()

    def show() -> None:
        out.write(numbers.render() + "\n")
        out.write(f"Number of nodes are : {len(numbers)}\n")

    for value in (51, 21, 11):
        numbers.insert_first(value)
    show()
    for value in (101, 111, 121):
        numbers.insert_last(value)
    show()
    numbers.delete_first()
    show()
    numbers.delete_last()
    show()
    numbers.insert_at(105, 4)
    show()
    numbers.delete_at(4)
    show()


def _doubly_section(out: TextIO) -> None:
    out.write("Link list gets created \n")
    letters: DoublyLinkedList[str] = DoublyLinkedList()

    def show() -> None:
        out.write("\n" + letters.render() + "\n")
        out.write(f"Number of elements are :{len(letters)}\n")

    for value in "ABC":
        letters.insert_first(value)
    show()
    for value in "XYZ":
        letters.insert_last(value)
    show()
    letters.delete_first()
    show()
    letters.delete_last()
    show()
    letters.insert_at("$", 4)
    show()
    letters.delete_at(4)
    show()


def _stack_section(out: TextIO) -> None:
    out.write("Stack gets created successfully....\n")
    stack: Stack[str] = Stack()

    def show() -> None:
        out.write(stack.render() + "\n")
        out.write(f"Number of elements in Stack are: {len(stack)}\n")

    for value in "ABCD":
        stack.push(value)
    show()
    out.write(f"Return value of peep is : {stack.peek()}\n")
    show()
    out.write(f"Poped element is : {stack.pop()}\n")
    show()
    out.write(f"Poped element is : {stack.pop()}\n")
    show()
    stack.push("E")
    show()


def _queue_section(out: TextIO) -> None:
    out.write("Queue gets created successfully....\n")
    queue: Queue[float] = Queue()

    def show() -> None:
        if len(queue) == 0:
            out.write("Queue is empty \n")
        else:
            out.write("".join(f"| {_number(v)} | " for v in queue) + "\n")
        out.write(f"Number of elements in Queue are: {len(queue)}\n")

    for value in (11.51556, 21.4584, 51.4587, 101.4584):
        queue.enqueue(value)
    show()
    out.write(f"Removed element is : {_number(queue.dequeue())}\n")
    show()
    out.write(f"Removed element is : {_number(queue.dequeue())}\n")
    show()
    queue.enqueue(121.4875)
    show()


def run_demo(out: TextIO | None = None) -> None:
    """Exercise every container in turn, writing the trace to ``out``."""
    stream = sys.stdout if out is None else out
    _singly_section(stream)
    _doubly_section(stream)
    _stack_section(stream)
    _queue_section(stream)


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: print the demonstration trace."""
    parser = argparse.ArgumentParser(
        prog="linkedkit-demo",
        description="Demonstrate the linked containers.",
    )
    parser.parse_args(argv)
    run_demo(sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())