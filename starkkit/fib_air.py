"""Fibonacci AIR: two columns where each row steps the sequence once."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Sequence, TypeVar

from .utils import BABY_BEAR_MODULUS, AirProofInput, AirProofRawInput, Matrix, to_field_vec

NUM_FIBONACCI_COLS = 2
NUM_PUBLIC_VALUES = 3

F = TypeVar("F")


def _is_power_of_two(n: int) -> bool:
    return n > 0 and n & (n - 1) == 0


@dataclass(frozen=True)
class FibonacciCols(Generic[F]):
    """One row of the Fibonacci trace."""

    left: F
    right: F


class ConstraintError(ValueError):
    """A trace does not satisfy the AIR's constraints."""


def _cols(row: Sequence[int], index: int) -> FibonacciCols[int]:
    if len(row) != NUM_FIBONACCI_COLS:
        raise ConstraintError(
            f"row {index} has {len(row)} columns, expected {NUM_FIBONACCI_COLS}"
        )
    return FibonacciCols(row[0], row[1])


def generate_trace_rows(a: int, b: int, n: int) -> Matrix:
    """Trace of ``n`` rows starting at ``(a, b)``; ``n`` must be a power of two."""
    if not _is_power_of_two(n):
        raise ValueError(f"trace height {n} is not a power of two")
    left, right = to_field_vec([a, b])
    rows = []
    for _ in range(n):
        rows.append([left, right])
        left, right = right, (left + right) % BABY_BEAR_MODULUS
    return rows


class FibonacciAir:
    """Constrains a trace to follow the Fibonacci recurrence.

    Public values are ``[a, b, x]``: the first row is ``(a, b)`` and the last
    row's right column is ``x``.
    """

    def width(self) -> int:
        return NUM_FIBONACCI_COLS

    def num_public_values(self) -> int:
        return NUM_PUBLIC_VALUES

    def eval(self, trace: Sequence[Sequence[int]], public_values: Sequence[int]) -> None:
        """Check every constraint, raising ``ConstraintError`` on the first failure."""
        if len(public_values) != NUM_PUBLIC_VALUES:
            raise ConstraintError(
                f"expected {NUM_PUBLIC_VALUES} public values, got {len(public_values)}"
            )
        if not trace:
            raise ConstraintError("trace is empty")
        a, b, x = public_values
        rows = [_cols(row, index) for index, row in enumerate(trace)]

        first = rows[0]
        if first.left != a:
            raise ConstraintError(f"first row left is {first.left}, expected {a}")
        if first.right != b:
            raise ConstraintError(f"first row right is {first.right}, expected {b}")

        for index, (local, nxt) in enumerate(zip(rows, rows[1:])):
            if local.right != nxt.left:
                raise ConstraintError(f"transition at row {index}: left does not follow right")
            if (local.left + local.right) % BABY_BEAR_MODULUS != nxt.right:
                raise ConstraintError(f"transition at row {index}: right is not the sum")

        if rows[-1].right != x:
            raise ConstraintError(f"last row right is {rows[-1].right}, expected {x}")


@dataclass(frozen=True)
class FibonacciChip:
    """Produces the Fibonacci trace for ``n`` rows starting at ``a`` and ``b``."""

    a: int
    b: int
    n: int

    def __post_init__(self) -> None:
        if not _is_power_of_two(self.n):
            raise ValueError(f"trace height {self.n} is not a power of two")

    def air(self) -> FibonacciAir:
        return FibonacciAir()

    def generate_air_proof_input(self) -> AirProofInput:
        """Trace and public values ``[a, b, last right value]``."""
        trace = generate_trace_rows(self.a, self.b, self.n)
        public_values = [trace[0][0], trace[0][1], trace[self.n - 1][1]]
        return AirProofInput(
            raw=AirProofRawInput(
                cached_mains=[],
                common_main=trace,
                public_values=public_values,
            ),
            cached_mains_pdata=[],
        )

    def air_name(self) -> str:
        return "FibonacciAir"

    def current_trace_height(self) -> int:
        return self.n

    def trace_width(self) -> int:
        return NUM_FIBONACCI_COLS