"""Test inputs: seeded randomness, field element conversion and proof inputs."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Any, Iterable, List, Optional

BABY_BEAR_MODULUS = 2013265921
"""Order of the BabyBear prime field, ``15 * 2**27 + 1``."""

_U32_LIMIT = 1 << 32
_U64_LIMIT = 1 << 64
_DEFAULT_SEED = bytes([42] * 32)

Matrix = List[List[int]]


def _check_u32(value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value < _U32_LIMIT:
        raise ValueError(f"expected an unsigned 32-bit integer, got {value!r}")
    return value


def from_wrapped_u32(value: int) -> int:
    """Field element for a 32-bit integer, reduced modulo the field order."""
    return _check_u32(value) % BABY_BEAR_MODULUS


def _from_canonical_u32(value: int) -> int:
    if _check_u32(value) >= BABY_BEAR_MODULUS:
        raise ValueError(f"{value} is not a canonical field element")
    return value


def to_field_vec(values: Iterable[int]) -> list[int]:
    """Field elements for canonical 32-bit integers; larger values are rejected."""
    return [_from_canonical_u32(value) for value in values]


def create_seeded_rng() -> random.Random:
    """Deterministic seeded generator, for tests."""
    return random.Random(int.from_bytes(_DEFAULT_SEED, "big"))


def create_seeded_rng_with_seed(seed: int) -> random.Random:
    """Deterministic generator from a 64-bit seed placed in the last 8 of 32 seed bytes."""
    if isinstance(seed, bool) or not isinstance(seed, int) or not 0 <= seed < _U64_LIMIT:
        raise ValueError(f"seed must be an unsigned 64-bit integer, got {seed!r}")
    seed_bytes = bytes(24) + seed.to_bytes(8, "big")
    return random.Random(int.from_bytes(seed_bytes, "big"))


def generate_random_matrix(rng: random.Random, height: int, width: int) -> Matrix:
    """Row-major ``height`` x ``width`` matrix of random field elements."""
    return [
        [from_wrapped_u32(rng.getrandbits(32)) for _ in range(width)]
        for _ in range(height)
    ]


@dataclass
class AirProofRawInput:
    """Traces and public values of one AIR."""

    cached_mains: list[Matrix] = field(default_factory=list)
    common_main: Optional[Matrix] = None
    public_values: list[int] = field(default_factory=list)


@dataclass
class AirProofInput:
    """Raw input of one AIR together with data of its committed cached traces."""

    raw: AirProofRawInput
    cached_mains_pdata: list[Any] = field(default_factory=list)


def _common_main_height(air_proof_input: AirProofInput) -> int:
    trace = air_proof_input.raw.common_main
    return 0 if trace is None else len(trace)


@dataclass
class ProofInputForTest:
    """AIRs and their proof inputs, without AIR ids."""

    airs: list[Any]
    per_air: list[AirProofInput]

    def sort_chips(self) -> None:
        """Sort AIRs by common main trace height, tallest first; ties keep their order.

        A missing common main trace counts as height zero.
        """
        if len(self.airs) != len(self.per_air):
            raise ValueError(
                f"{len(self.airs)} AIRs but {len(self.per_air)} proof inputs"
            )
        pairs = sorted(
            zip(self.airs, self.per_air),
            key=lambda pair: -_common_main_height(pair[1]),
        )
        self.airs = [air for air, _ in pairs]
        self.per_air = [proof_input for _, proof_input in pairs]