"""Linked lists, a stack and a queue built from linked nodes, with a demo and a queue menu."""

__version__ = "0.1.0"
__all__ = ["arithmetic", "singly", "doubly", "stack", "fifo", "demo", "menu"]