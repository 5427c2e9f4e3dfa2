import pytest

from andamio_cli.hexutil import hex_to_string

POLICY = "ab" * 28


@pytest.mark.parametrize("name", ["abc", "Andamio", "course-101", "ü-unicode"])
def test_round_trip_asset_name(name):
    assert hex_to_string(POLICY + name.encode("utf-8").hex()) == name


def test_policy_prefix_is_ignored():
    other_policy = "00" * 28
    suffix = "hello".encode().hex()
    assert hex_to_string(POLICY + suffix) == hex_to_string(other_policy + suffix)


def test_exactly_policy_length_is_too_short():
    with pytest.raises(ValueError, match="too short"):
        hex_to_string(POLICY)


def test_empty_is_too_short():
    with pytest.raises(ValueError, match="too short"):
        hex_to_string("")


def test_invalid_hex_raises():
    with pytest.raises(ValueError, match="failed to decode"):
        hex_to_string(POLICY + "zz")


def test_odd_length_raises():
    with pytest.raises(ValueError, match="failed to decode"):
        hex_to_string(POLICY + "616")