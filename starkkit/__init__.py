"""FRI parameters, verifier cost estimates, hash call counting, metrics and example AIRs."""

__version__ = "0.1.0"

__all__ = [
    "bench",
    "config",
    "cost_estimate",
    "dummy_interaction",
    "fib_air",
    "fri_params",
    "instrument",
    "utils",
]