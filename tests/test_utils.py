import pytest

from starkkit.utils import (
    BABY_BEAR_MODULUS,
    AirProofInput,
    AirProofRawInput,
    ProofInputForTest,
    create_seeded_rng,
    create_seeded_rng_with_seed,
    from_wrapped_u32,
    generate_random_matrix,
    to_field_vec,
)


def _input(height):
    trace = None if height is None else [[0, 0]] * height
    return AirProofInput(raw=AirProofRawInput(common_main=trace))


def test_to_field_vec_keeps_canonical_values():
    assert to_field_vec([0, 1, 3, 5, 7, 4, 546, 889]) == [0, 1, 3, 5, 7, 4, 546, 889]


def test_to_field_vec_rejects_non_canonical():
    with pytest.raises(ValueError):
        to_field_vec([1, BABY_BEAR_MODULUS])


def test_to_field_vec_rejects_negative():
    with pytest.raises(ValueError):
        to_field_vec([-1])


def test_from_wrapped_u32_reduces():
    assert from_wrapped_u32(BABY_BEAR_MODULUS) == 0
    assert from_wrapped_u32(BABY_BEAR_MODULUS + 5) == 5
    assert from_wrapped_u32(12) == 12


def test_from_wrapped_u32_rejects_out_of_range():
    with pytest.raises(ValueError):
        from_wrapped_u32(1 << 32)


def test_seeded_rng_is_deterministic():
    first = generate_random_matrix(create_seeded_rng(), 4, 3)
    second = generate_random_matrix(create_seeded_rng(), 4, 3)
    assert first == second


def test_random_matrix_shape_and_range():
    matrix = generate_random_matrix(create_seeded_rng_with_seed(0), 8, 5)
    assert len(matrix) == 8
    assert all(len(row) == 5 for row in matrix)
    assert all(0 <= value < BABY_BEAR_MODULUS for row in matrix for value in row)


def test_seeded_rng_with_seed_depends_on_seed():
    same_a = generate_random_matrix(create_seeded_rng_with_seed(7), 2, 4)
    same_b = generate_random_matrix(create_seeded_rng_with_seed(7), 2, 4)
    other = generate_random_matrix(create_seeded_rng_with_seed(8), 2, 4)
    assert same_a == same_b
    assert same_a != other


def test_seed_out_of_range():
    with pytest.raises(ValueError):
        create_seeded_rng_with_seed(1 << 64)
    with pytest.raises(ValueError):
        create_seeded_rng_with_seed(-1)


def test_sort_chips_descending_and_stable():
    inputs = [_input(2), _input(8), _input(None), _input(8), _input(4)]
    proof_input = ProofInputForTest(airs=["a", "b", "c", "d", "e"], per_air=inputs)
    proof_input.sort_chips()
    assert proof_input.airs == ["b", "d", "e", "a", "c"]
    assert proof_input.per_air == [inputs[1], inputs[3], inputs[4], inputs[0], inputs[2]]


def test_sort_chips_length_mismatch():
    proof_input = ProofInputForTest(airs=["a"], per_air=[])
    with pytest.raises(ValueError):
        proof_input.sort_chips()