"""AIR with columns ``| count | fields[..] |`` that sends or receives its fields on a bus.

The AIR itself has no constraints. Its only effect is one interaction per row:
the fields, with multiplicity ``count``, on bus ``bus_index``.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field, replace
from typing import Optional, Sequence

from .utils import AirProofInput, AirProofRawInput, Matrix, to_field_vec


def _next_power_of_two(n: int) -> int:
    return 1 if n <= 1 else 1 << (n - 1).bit_length()


class DummyInteractionCols:
    """Column layout of the unpartitioned trace."""

    @staticmethod
    def count_col() -> int:
        return 0

    @staticmethod
    def field_col(field_idx: int) -> int:
        return field_idx + 1


class InteractionType(enum.Enum):
    """Direction of an interaction on a bus."""

    SEND = "send"
    RECEIVE = "receive"


@dataclass(frozen=True)
class Interaction:
    """One bus interaction produced by a trace row."""

    bus_index: int
    fields: tuple[int, ...]
    count: int
    interaction_type: InteractionType


@dataclass(frozen=True)
class DummyInteractionAir:
    """Sends (``is_send``) or receives its fields with multiplicity ``count``.

    With ``partition`` set, ``count`` and the fields live in separate main
    trace partitions: the count in the common main trace, the fields in a
    cached trace.
    """

    field_width: int
    is_send: bool
    bus_index: int
    partition: bool = False

    def partitioned(self) -> "DummyInteractionAir":
        """The same AIR with its main trace split into count and fields."""
        return replace(self, partition=True)

    def width(self) -> int:
        return 1 + self.field_width

    def cached_main_widths(self) -> list[int]:
        return [self.field_width] if self.partition else []

    def common_main_width(self) -> int:
        return 1 if self.partition else 1 + self.field_width

    def interaction_type(self) -> InteractionType:
        return InteractionType.SEND if self.is_send else InteractionType.RECEIVE

    def eval(self, row: Sequence[int]) -> Interaction:
        """Interaction of one row laid out as ``[count, *fields]``.

        For a partitioned AIR the row is the common main row followed by the
        cached main row, which gives the same layout.
        """
        if len(row) != self.width():
            raise ValueError(f"row has {len(row)} columns, expected {self.width()}")
        count = row[DummyInteractionCols.count_col()]
        fields = tuple(
            row[DummyInteractionCols.field_col(i)] for i in range(self.field_width)
        )
        return Interaction(
            bus_index=self.bus_index,
            fields=fields,
            count=count,
            interaction_type=self.interaction_type(),
        )


@dataclass
class DummyInteractionData:
    """Per-row counts and field values."""

    count: list[int] = field(default_factory=list)
    fields: list[list[int]] = field(default_factory=list)


def _validate(data: DummyInteractionData, field_width: int) -> None:
    height = len(data.count)
    if len(data.fields) != height:
        raise ValueError(f"{height} counts but {len(data.fields)} field rows")
    if not data.fields:
        raise ValueError("interaction data has no rows")
    width = len(data.fields[0])
    if width != field_width:
        raise ValueError(f"field rows have width {width}, expected {field_width}")
    if any(len(row) != width for row in data.fields):
        raise ValueError("field rows do not all have the same width")


class DummyInteractionChip:
    """Holds interaction data and produces the traces for a :class:`DummyInteractionAir`."""

    def __init__(self, air: DummyInteractionAir) -> None:
        self.air = air
        self._data: Optional[DummyInteractionData] = None

    @classmethod
    def without_partition(
        cls, field_width: int, is_send: bool, bus_index: int
    ) -> "DummyInteractionChip":
        return cls(DummyInteractionAir(field_width, is_send, bus_index))

    @classmethod
    def with_partition(
        cls, field_width: int, is_send: bool, bus_index: int
    ) -> "DummyInteractionChip":
        return cls(DummyInteractionAir(field_width, is_send, bus_index).partitioned())

    def load_data(self, data: DummyInteractionData) -> None:
        """Check the shape of ``data`` against the AIR and keep it."""
        _validate(data, self.air.field_width)
        self._data = data

    def _traces_with_partition(self, data: DummyInteractionData) -> tuple[Matrix, Matrix]:
        width = self.air.field_width
        height = _next_power_of_two(len(data.count))
        padding = height - len(data.count)
        counts = to_field_vec(list(data.count) + [0] * padding)
        rows = [list(row) for row in data.fields] + [[0] * width for _ in range(padding)]
        common_main = [[count] for count in counts]
        cached_main = [to_field_vec(row) for row in rows]
        return common_main, cached_main

    def _trace_without_partition(self, data: DummyInteractionData) -> Matrix:
        width = self.air.field_width
        height = _next_power_of_two(len(data.count))
        rows = [
            to_field_vec([count, *fields]) for count, fields in zip(data.count, data.fields)
        ]
        rows.extend([0] * (width + 1) for _ in range(height - len(rows)))
        return rows

    def generate_air_proof_input(self) -> AirProofInput:
        """Traces padded with zero rows to a power-of-two height."""
        if self._data is None:
            raise ValueError("no interaction data loaded")
        data = self._data
        _validate(data, self.air.field_width)
        if self.air.partition:
            common_main, cached_main = self._traces_with_partition(data)
            return AirProofInput(
                raw=AirProofRawInput(
                    cached_mains=[cached_main],
                    common_main=common_main,
                    public_values=[],
                ),
                cached_mains_pdata=[],
            )
        return AirProofInput(
            raw=AirProofRawInput(
                cached_mains=[],
                common_main=self._trace_without_partition(data),
                public_values=[],
            ),
            cached_mains_pdata=[],
        )

    def air_name(self) -> str:
        return "DummyInteractionAir"

    def current_trace_height(self) -> int:
        return len(self._data.count) if self._data is not None else 0

    def trace_width(self) -> int:
        return self.air.field_width + 1