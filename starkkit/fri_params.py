"""FRI protocol parameters and the standard parameter sets."""

from __future__ import annotations

import logging
import os
from dataclasses import asdict, dataclass, fields
from typing import Any, Mapping

logger = logging.getLogger(__name__)

FAST_TEST_ENV_VAR = "OPENVM_FAST_TEST"

# num_queries for each supported log_blowup; every set uses 16 proof-of-work bits.
_STANDARD_NUM_QUERIES = {1: 100, 2: 42, 3: 28, 4: 21}
_STANDARD_POW_BITS = 16
_TARGET_SECURITY_BITS = 100


@dataclass(frozen=True)
class FriParameters:
    """Parameters of the FRI low-degree test."""

    log_blowup: int
    log_final_poly_len: int
    num_queries: int
    proof_of_work_bits: int

    def get_conjectured_security_bits(self, challenge_field_bits: int) -> int:
        """Conjectured bits of security (ethSTARK, section 5.10.1, eq. 19).

        ``challenge_field_bits`` is the bit size of the challenge (extension) field.
        """
        fri_query_security_bits = self.num_queries * self.log_blowup + self.proof_of_work_bits
        return min(challenge_field_bits, fri_query_security_bits)

    def max_constraint_degree(self) -> int:
        """Largest constraint degree supported by this blowup."""
        return (1 << self.log_blowup) + 1

    @classmethod
    def standard_fast(cls) -> "FriParameters":
        """Standard parameters with the smallest blowup."""
        return standard_fri_params_with_100_bits_conjectured_security(1)

    @classmethod
    def standard_with_100_bits_conjectured_security(cls, log_blowup: int) -> "FriParameters":
        """Standard parameters for ``log_blowup`` with 100 bits of conjectured security."""
        return standard_fri_params_with_100_bits_conjectured_security(log_blowup)

    def to_dict(self) -> dict[str, int]:
        """Plain mapping of the parameters, suitable for JSON."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "FriParameters":
        """Build parameters from a mapping produced by :meth:`to_dict`."""
        names = [f.name for f in fields(cls)]
        missing = [name for name in names if name not in data]
        if missing:
            raise KeyError(f"missing FRI parameter fields: {', '.join(missing)}")
        unknown = sorted(set(data) - set(names))
        if unknown:
            raise ValueError(f"unknown FRI parameter fields: {', '.join(unknown)}")
        values = {}
        for name in names:
            value = data[name]
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ValueError(f"field {name!r} must be a non-negative integer, got {value!r}")
            values[name] = value
        return cls(**values)


def standard_fri_params_with_100_bits_conjectured_security(log_blowup: int) -> FriParameters:
    """Pre-defined FRI parameters with 100 bits of conjectured security.

    Assumes the challenge field has more than 100 bits. When the environment
    variable ``OPENVM_FAST_TEST`` is ``"1"`` an insecure, quick set is returned.
    """
    if os.environ.get(FAST_TEST_ENV_VAR) == "1":
        return FriParameters(
            log_blowup=log_blowup,
            log_final_poly_len=0,
            num_queries=2,
            proof_of_work_bits=0,
        )
    try:
        num_queries = _STANDARD_NUM_QUERIES[log_blowup]
    except KeyError:
        raise ValueError(f"No standard FRI params defined for log blowup {log_blowup}") from None
    fri_params = FriParameters(
        log_blowup=log_blowup,
        log_final_poly_len=0,
        num_queries=num_queries,
        proof_of_work_bits=_STANDARD_POW_BITS,
    )
    if fri_params.get_conjectured_security_bits(_TARGET_SECURITY_BITS) < _TARGET_SECURITY_BITS:
        raise AssertionError("standard FRI parameters fall short of 100 bits of security")
    logger.info(
        "FRI parameters | log_blowup: %-2d | num_queries: %-2d | proof_of_work_bits: %-2d",
        log_blowup,
        fri_params.num_queries,
        fri_params.proof_of_work_bits,
    )
    return fri_params