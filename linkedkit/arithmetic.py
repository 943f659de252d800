"""Addition and subtraction of a fixed pair of integers."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Arithmetic:
    """Holds two integers and computes their sum and difference."""

    first: int
    second: int

    def addition(self) -> int:
        """Return the sum of both operands."""
        return self.first + self.second

    def subtraction(self) -> int:
        """Return the first operand minus the second."""
        return self.first - self.second