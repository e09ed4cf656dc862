"""Call-counting wrapper for permutations, compression functions and hashers."""

from __future__ import annotations

import dataclasses
import logging
import threading
from dataclasses import dataclass
from typing import Any, Generic, Iterable, Sequence, TypeVar

from .fri_params import FriParameters

logger = logging.getLogger(__name__)

T = TypeVar("T")

_PERMUTE = "permute"
_COMPRESS = "compress"
_HASH = "hash"


def _type_label(value: Any) -> str:
    return type(value).__qualname__


class Instrumented:
    """Wraps a primitive and records the input length of every call.

    Calls are grouped by kind and input type under keys such as
    ``"permute:list"``. Counting may slow things down.
    """

    def __init__(self, inner: Any, is_on: bool = True) -> None:
        self.inner = inner
        self.is_on = is_on
        self.input_lens_by_type: dict[str, list[int]] = {}
        self._lock = threading.Lock()

    def _record(self, key: str, length: int) -> None:
        if not self.is_on:
            return
        with self._lock:
            self.input_lens_by_type.setdefault(key, []).append(length)

    def permute(self, state: Any) -> Any:
        """Apply the wrapped permutation, counting one call."""
        self._record(f"{_PERMUTE}:{_type_label(state)}", 1)
        return self.inner.permute(state)

    def compress(self, inputs: Sequence[Any]) -> Any:
        """Apply the wrapped compression function to ``inputs``."""
        label = _type_label(inputs[0]) if len(inputs) else "empty"
        self._record(f"{_COMPRESS}:{label}", len(inputs))
        return self.inner.compress(inputs)

    def hash_iter(self, items: Iterable[Any]) -> Any:
        """Hash ``items`` with the wrapped hasher, counting their number."""
        if not self.is_on:
            return self.inner.hash_iter(items)
        materialized = list(items)
        label = _type_label(materialized[0]) if materialized else "empty"
        self._record(f"{_HASH}:{label}", len(materialized))
        return self.inner.hash_iter(materialized)

    def clear(self) -> None:
        """Forget every recorded call."""
        with self._lock:
            self.input_lens_by_type.clear()

    def stark_hash_statistics(
        self,
        name: str | None,
        fri_params: FriParameters,
        custom: Any = None,
    ) -> "StarkHashStatistics[Any]":
        """Summarise recorded permutation calls.

        Raises ``ValueError`` if anything other than permutations was recorded.
        """
        with self._lock:
            entries = list(self.input_lens_by_type.items())
        permutations = 0
        for key, lens in entries:
            if not key.startswith(f"{_PERMUTE}:"):
                raise ValueError(f"Permutation type not yet supported: {key}")
            count = sum(lens)
            logger.info("Permutation: %s, Count: %d", key, count)
            permutations += count
        return StarkHashStatistics(
            name=name if name is not None else type(self.inner).__qualname__,
            stats=HashStatistics(permutations=permutations),
            fri_params=fri_params,
            custom=custom,
        )


@dataclass
class HashStatistics:
    """Number of hash permutations performed."""

    permutations: int


@dataclass
class StarkHashStatistics(Generic[T]):
    """Hash statistics of a run, with its FRI parameters and custom data."""

    name: str
    stats: HashStatistics
    fri_params: FriParameters
    custom: T

    def to_dict(self) -> dict[str, Any]:
        """Plain mapping, suitable for JSON."""
        custom: Any = self.custom
        if dataclasses.is_dataclass(custom) and not isinstance(custom, type):
            custom = dataclasses.asdict(custom)
        elif hasattr(custom, "to_dict"):
            custom = custom.to_dict()
        return {
            "name": self.name,
            "stats": dataclasses.asdict(self.stats),
            "fri_params": self.fri_params.to_dict(),
            "custom": custom,
        }