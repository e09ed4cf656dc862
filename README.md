# starkkit

`starkkit` holds the supporting pieces around a FRI-based STARK prover:
parameter selection, verifier cost estimates, call counting for hash
primitives, metric snapshots, and two small example AIRs whose constraints
can be checked directly in Python. It has no dependencies beyond the
standard library.

Field elements are plain `int`s in the BabyBear prime field
(`starkkit.utils.BABY_BEAR_MODULUS`, `2013265921`); matrices are lists of rows.

## Modules

- `starkkit.fri_params` – the frozen `FriParameters` record
  (`log_blowup`, `log_final_poly_len`, `num_queries`, `proof_of_work_bits`)
  with `get_conjectured_security_bits`, `max_constraint_degree`, `to_dict` /
  `from_dict`, and the standard sets with 100 bits of conjectured security
  from `standard_fri_params_with_100_bits_conjectured_security(log_blowup)`
  (also `FriParameters.standard_fast()` and
  `FriParameters.standard_with_100_bits_conjectured_security`). Log blowups
  1 to 4 are defined (100, 42, 28 and 21 queries, 16 proof-of-work bits);
  any other value raises `ValueError`. When the environment variable
  `OPENVM_FAST_TEST` is `1`, a cheap insecure set (2 queries, no
  proof of work) is returned for any blowup.
- `starkkit.config` – the `EngineType` enum (`BabyBearPoseidon2`,
  `BabyBearBlake3`, `BabyBearKeccak`, `GoldilocksPoseidon`) and
  `setup_tracing()` / `setup_tracing_with_log_level(level)`, which configure
  the `starkkit` logger. A valid level named in `STARKKIT_LOG` overrides the
  level passed in.
- `starkkit.instrument` – `Instrumented(inner)` wraps any object with
  `permute`, `compress` or `hash_iter` methods and records the input length
  of every call, keyed by kind and input type (for example `"permute:list"`).
  Recording stops while `is_on` is false; `clear()` forgets everything.
  `stark_hash_statistics(name, fri_params, custom)` sums the recorded
  permutations into a `StarkHashStatistics`, and raises `ValueError` if
  compression or hashing calls were recorded.
- `starkkit.cost_estimate` – `VerifierCostParameters` and the estimates
  `MmcsVerifyBatchCostEstimate`, `FriOpenInputCostEstimate`,
  `FriQueryCostEstimate` and `FriVerifierCostEstimate`. Estimates add with
  `+`. The verifier estimate sums the main and permutation rounds (opened at
  two points) and the quotient round (one point); preprocessed traces and
  constraint evaluation are not counted.
- `starkkit.utils` – `create_seeded_rng`, `create_seeded_rng_with_seed`,
  `generate_random_matrix`, `from_wrapped_u32`, `to_field_vec` (rejects
  non-canonical values), and the `AirProofRawInput`, `AirProofInput` and
  `ProofInputForTest` records. `ProofInputForTest.sort_chips()` orders AIRs by
  common main trace height, tallest first, keeping ties in order.
- `starkkit.bench` – `run_with_metric_collection(output_path_envar, func)`
  calls `func` with a recorder offering `gauge(name, value, labels)` and
  `increment_counter(name, value, labels)`; if the named environment variable
  is set, the snapshot is written as JSON to that path.
  `serialize_metric_snapshot` turns a list of `MetricEntry` into
  `{"counter": [...], "gauge": [...]}`; histograms raise `ValueError`.
- `starkkit.fib_air` – `generate_trace_rows(a, b, n)`, `FibonacciAir` whose
  `eval(trace, public_values)` raises `ConstraintError` on the first violated
  constraint, `FibonacciChip`, and the `FibonacciCols` row record.
- `starkkit.dummy_interaction` – `DummyInteractionAir`, whose `eval(row)`
  returns the `Interaction` a row `[count, *fields]` puts on its bus, and
  `DummyInteractionChip`, built with `without_partition` or `with_partition`,
  which checks loaded `DummyInteractionData` and pads the traces with zero
  rows to a power-of-two height.

## Examples

```python
from starkkit.fri_params import FriParameters
from starkkit.cost_estimate import FriVerifierCostEstimate, VerifierCostParameters

fri = FriParameters.standard_with_100_bits_conjectured_security(2)
print(fri.get_conjectured_security_bits(100))  # 100
print(fri.max_constraint_degree())             # 5

params = VerifierCostParameters(
    num_main_columns=10, num_perm_columns=8, log_max_height=20, quotient_degree=2
)
estimate = FriVerifierCostEstimate.estimate(params, fri, 4)
print(estimate.open_input.num_ro_eval, estimate.query.num_fri_folds)
```

```python
from starkkit.fib_air import FibonacciAir, FibonacciChip, generate_trace_rows

trace = generate_trace_rows(0, 1, 8)
FibonacciAir().eval(trace, [0, 1, 21])  # raises ConstraintError on a violation

proof_input = FibonacciChip(0, 1, 8).generate_air_proof_input()
print(proof_input.raw.public_values)  # [0, 1, 21]
```

```python
from starkkit.dummy_interaction import DummyInteractionChip, DummyInteractionData

chip = DummyInteractionChip.without_partition(1, True, 0)
chip.load_data(DummyInteractionData(count=[1, 2, 4], fields=[[1], [2], [3]]))
print(chip.generate_air_proof_input().raw.common_main)
# [[1, 1], [2, 2], [4, 3], [0, 0]]
```

```python
from starkkit.fri_params import FriParameters
from starkkit.instrument import Instrumented

class Reverse:
    def permute(self, state):
        return state[::-1]

perm = Instrumented(Reverse())
perm.permute([1, 2, 3])
stats = perm.stark_hash_statistics("reverse", FriParameters.standard_fast())
print(stats.stats.permutations)  # 1
```

```python
from starkkit.bench import run_with_metric_collection

def work(recorder):
    recorder.increment_counter("rows", 8, {"air": "fib"})
    recorder.gauge("seconds", 0.25)
    return "done"

run_with_metric_collection("METRICS_OUTPUT", work)
```

## What it does not do

There is no prover or verifier here: no key generation, polynomial
commitments, FRI proofs, or Poseidon2, Blake3 or Keccak primitives.
`EngineType` only names configurations. The example AIRs check their traces
directly; `DummyInteractionAir.eval` reports a row's interaction but nothing
balances buses across AIRs, and a partitioned chip does not commit its cached
trace (`cached_mains_pdata` stays empty). There is no command-line tool.

## Running the tests

```
pip install .[test]
pytest
```