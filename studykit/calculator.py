"""A two-operand integer calculator."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Calculator:
    """Holds two integers and combines them."""

    a: int
    b: int

    def add(self) -> int:
        """Return the sum of the two operands."""
        return self.a + self.b

    def subtract(self) -> int:
        """Return the first operand minus the second."""
        return self.a - self.b