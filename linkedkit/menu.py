"""Interactive, menu-driven front end to an integer queue."""

from __future__ import annotations

import argparse
import sys
from typing import Iterable, Iterator, Sequence, TextIO

from linkedkit.fifo import EmptyQueueError, Queue

RULE = "----------------------------------------------\n"

MENU = (
    RULE
    + "--------- Please select the option -----------\n"
    + "1 : Insert new element into the queue\n"
    + "2 : Remove the element from the queue\n"
    + "3 : Display the elements of the queue\n"
    + "4 : Count the number of elements from the queue\n"
    + "0 : Exit the application\n"
)


def _tokens(lines: Iterable[str]) -> Iterator[str]:
    """Yield whitespace-separated tokens from ``lines``."""
    for line in lines:
        yield from line.split()


def _read_int(tokens: Iterator[str]) -> int | None:
    """Return the next token as an integer, or None if it is not one.

    Raises StopIteration when the input is exhausted.
    """
    token = next(tokens)
    try:
        return int(token)
    except ValueError:
        return None


def _render(queue: Queue[int]) -> str:
    if len(queue) == 0:
        return "Queue is empty\n"
    return "".join(f"| {value} | - " for value in queue) + "\n"


def run_menu(lines: Iterable[str], out: TextIO | None = None) -> Queue[int]:
    """Drive the queue menu from ``lines`` and write the dialogue to ``out``.

    The session ends on choice 0 or when the input runs out. The queue as
    it stands at the end is returned.
    """
    stream = sys.stdout if out is None else out
    tokens = _tokens(lines)
    queue: Queue[int] = Queue()
    stream.write("Queue gets created succesfully...\n")

    while True:
        stream.write(MENU)
        try:
            choice = _read_int(tokens)
        except StopIteration:
            return queue
        stream.write(RULE)

        if choice == 1:
            stream.write("Enter the element that you want to insert : \n")
            try:
                value = _read_int(tokens)
            except StopIteration:
                return queue
            if value is None:
                stream.write("Please enter the valid option\n")
                continue
            queue.enqueue(value)
            stream.write("Elemnt gets inserted succesfully\n")
        elif choice == 2:
            try:
                removed = queue.dequeue()
            except EmptyQueueError:
                stream.write("Queue is empty\n")
            else:
                stream.write(f"Element removed from queue is : {removed}\n")
        elif choice == 3:
            stream.write("Elements of the queue are : \n")
            stream.write(_render(queue))
        elif choice == 4:
            stream.write(f"Number of elements in queue are : {len(queue)}\n")
        elif choice == 0:
            stream.write("Thank you for using our application\n")
            return queue
        else:
            stream.write("Please enter the valid option\n")


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: run the queue menu on standard input."""
    parser = argparse.ArgumentParser(
        prog="linkedkit-menu",
        description="Manage an integer queue through a text menu.",
    )
    parser.parse_args(argv)
    run_menu(sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())