import json

import pytest

from starkkit.fri_params import (
    FriParameters,
    standard_fri_params_with_100_bits_conjectured_security,
)


@pytest.fixture(autouse=True)
def _no_fast_test(monkeypatch):
    monkeypatch.delenv("OPENVM_FAST_TEST", raising=False)


@pytest.mark.parametrize(
    "log_blowup, num_queries",
    [(1, 100), (2, 42), (3, 28), (4, 21)],
)
def test_standard_tables(log_blowup, num_queries):
    params = standard_fri_params_with_100_bits_conjectured_security(log_blowup)
    assert params == FriParameters(log_blowup, 0, num_queries, 16)


@pytest.mark.parametrize("log_blowup", [1, 2, 3, 4])
def test_standard_sets_reach_100_bits(log_blowup):
    params = FriParameters.standard_with_100_bits_conjectured_security(log_blowup)
    assert params.get_conjectured_security_bits(100) == 100


def test_standard_fast_uses_blowup_one():
    assert FriParameters.standard_fast() == (
        standard_fri_params_with_100_bits_conjectured_security(1)
    )


@pytest.mark.parametrize("log_blowup", [0, 5, 9])
def test_unsupported_blowup_raises(log_blowup):
    with pytest.raises(ValueError, match="log blowup"):
        standard_fri_params_with_100_bits_conjectured_security(log_blowup)


def test_fast_test_environment(monkeypatch):
    monkeypatch.setenv("OPENVM_FAST_TEST", "1")
    params = standard_fri_params_with_100_bits_conjectured_security(7)
    assert params == FriParameters(7, 0, 2, 0)


def test_fast_test_environment_other_value_ignored(monkeypatch):
    monkeypatch.setenv("OPENVM_FAST_TEST", "0")
    assert standard_fri_params_with_100_bits_conjectured_security(2).num_queries == 42


def test_security_bits_capped_by_field():
    params = FriParameters(1, 0, 100, 16)
    assert params.get_conjectured_security_bits(50) == 50


def test_security_bits_from_queries():
    params = FriParameters(1, 0, 100, 16)
    assert params.get_conjectured_security_bits(200) == 116


def test_max_constraint_degree():
    assert FriParameters(1, 0, 100, 16).max_constraint_degree() == 3


def test_max_constraint_degree_grows_with_blowup():
    degrees = [FriParameters(lb, 0, 1, 0).max_constraint_degree() for lb in range(1, 6)]
    assert degrees == sorted(degrees)
    assert len(set(degrees)) == len(degrees)


def test_dict_round_trip():
    params = FriParameters(3, 1, 28, 16)
    assert FriParameters.from_dict(params.to_dict()) == params


def test_json_round_trip():
    params = FriParameters(2, 0, 42, 16)
    text = json.dumps(params.to_dict())
    assert FriParameters.from_dict(json.loads(text)) == params


def test_to_dict_keys():
    assert set(FriParameters(1, 0, 2, 0).to_dict()) == {
        "log_blowup",
        "log_final_poly_len",
        "num_queries",
        "proof_of_work_bits",
    }


def test_from_dict_missing_field():
    with pytest.raises(KeyError):
        FriParameters.from_dict({"log_blowup": 1, "num_queries": 2, "proof_of_work_bits": 0})


def test_from_dict_unknown_field():
    data = FriParameters(1, 0, 2, 0).to_dict()
    data["extra"] = 3
    with pytest.raises(ValueError, match="extra"):
        FriParameters.from_dict(data)


def test_from_dict_rejects_negative():
    data = FriParameters(1, 0, 2, 0).to_dict()
    data["num_queries"] = -1
    with pytest.raises(ValueError):
        FriParameters.from_dict(data)


def test_frozen():
    params = FriParameters(1, 0, 2, 0)
    with pytest.raises(AttributeError):
        params.num_queries = 5
    assert params.num_queries == 2
    assert params == FriParameters(1, 0, 2, 0)