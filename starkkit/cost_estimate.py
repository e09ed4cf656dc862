"""Estimates of STARK verifier cost under FRI."""

from __future__ import annotations

from dataclasses import dataclass

from .fri_params import FriParameters


@dataclass(frozen=True)
class VerifierCostParameters:
    """Properties of a multi-trace circuit needed to estimate verifier cost."""

    num_main_columns: int
    """Total base field columns across all AIR traces before the challenge."""
    num_perm_columns: int
    """Total base field columns across all AIR traces for the logup permutation."""
    log_max_height: int
    """log2 of the maximum AIR trace height."""
    quotient_degree: int
    """Degree of the quotient polynomial, ``max_constraint_degree - 1``."""


@dataclass(frozen=True)
class MmcsVerifyBatchCostEstimate:
    """Cost of an MMCS batch verification: leaf hashing plus a Merkle path."""

    num_f_to_hash: int
    """Number of field elements to hash."""
    num_compress: int
    """Number of 2-to-1 compression calls."""

    @classmethod
    def from_dim(cls, width: int, max_log_height_lde: int) -> "MmcsVerifyBatchCostEstimate":
        """``width`` base field columns in an MMCS of height ``2**max_log_height_lde``."""
        return cls(num_f_to_hash=width, num_compress=max_log_height_lde)

    def __add__(self, other: object) -> "MmcsVerifyBatchCostEstimate":
        if not isinstance(other, MmcsVerifyBatchCostEstimate):
            return NotImplemented
        return MmcsVerifyBatchCostEstimate(
            num_f_to_hash=self.num_f_to_hash + other.num_f_to_hash,
            num_compress=self.num_compress + other.num_compress,
        )


@dataclass(frozen=True)
class FriOpenInputCostEstimate:
    """Cost of opening committed inputs during FRI verification."""

    mmcs: MmcsVerifyBatchCostEstimate
    num_ro_eval: int
    """Number of reduced-opening accumulation steps."""

    @classmethod
    def estimate(
        cls,
        width: int,
        max_log_height: int,
        num_points: int,
        fri_params: FriParameters,
    ) -> "FriOpenInputCostEstimate":
        """Estimate for ``width`` columns of height ``2**max_log_height`` opened at ``num_points``.

        The reported MMCS cost is that of a single opening over the trace
        height before blowup; only the reduced-opening count scales with the
        number of queries.
        """
        num_ro_eval = width * num_points * fri_params.num_queries
        return cls(
            mmcs=MmcsVerifyBatchCostEstimate.from_dim(width, max_log_height),
            num_ro_eval=num_ro_eval,
        )

    def __add__(self, other: object) -> "FriOpenInputCostEstimate":
        if not isinstance(other, FriOpenInputCostEstimate):
            return NotImplemented
        return FriOpenInputCostEstimate(
            mmcs=self.mmcs + other.mmcs,
            num_ro_eval=self.num_ro_eval + other.num_ro_eval,
        )


@dataclass(frozen=True)
class FriQueryCostEstimate:
    """Cost of answering the FRI queries."""

    mmcs: MmcsVerifyBatchCostEstimate
    num_fri_folds: int
    """Number of single FRI fold evaluations."""

    @classmethod
    def estimate(cls, max_log_height: int, fri_params: FriParameters) -> "FriQueryCostEstimate":
        """Estimate for a trace of height ``2**max_log_height`` before blowup."""
        queries = fri_params.num_queries
        per_query_compress = (
            max_log_height * (max_log_height + fri_params.log_blowup - 1) // 2
        )
        mmcs = MmcsVerifyBatchCostEstimate(
            num_f_to_hash=2 * max_log_height * queries,
            num_compress=per_query_compress * queries,
        )
        return cls(mmcs=mmcs, num_fri_folds=max_log_height * queries)

    def __add__(self, other: object) -> "FriQueryCostEstimate":
        if not isinstance(other, FriQueryCostEstimate):
            return NotImplemented
        return FriQueryCostEstimate(
            mmcs=self.mmcs + other.mmcs,
            num_fri_folds=self.num_fri_folds + other.num_fri_folds,
        )


@dataclass(frozen=True)
class FriVerifierCostEstimate:
    """Total FRI verifier cost.

    Constraint evaluation is left out because it does not scale with the
    number of FRI queries.
    """

    open_input: FriOpenInputCostEstimate
    query: FriQueryCostEstimate

    @classmethod
    def estimate(
        cls,
        params: VerifierCostParameters,
        fri_params: FriParameters,
        ext_degree: int,
    ) -> "FriVerifierCostEstimate":
        """Sum the main, permutation and quotient rounds.

        Main and permutation traces open at zeta and omega * zeta; the
        quotient opens at zeta only. Preprocessed traces are not counted.
        """
        height = params.log_max_height
        rounds = (
            (params.num_main_columns, 2),
            (params.num_perm_columns, 2),
            (params.quotient_degree * ext_degree, 1),
        )
        open_inputs = [
            FriOpenInputCostEstimate.estimate(width, height, points, fri_params)
            for width, points in rounds
        ]
        queries = [FriQueryCostEstimate.estimate(height, fri_params) for _ in rounds]
        open_input = open_inputs[0]
        for item in open_inputs[1:]:
            open_input = open_input + item
        query = queries[0]
        for item in queries[1:]:
            query = query + item
        return cls(open_input=open_input, query=query)