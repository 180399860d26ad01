import pytest

from borderless_p2p.env import Address, Env, check_i128, fixed_bytes


def test_get_returns_default_when_missing():
    env = Env()
    assert env.get("missing", ()) == ()
    assert env.get("missing") is None


def test_set_then_get_round_trip():
    env = Env()
    env.set("products", (1, 2, 3))
    assert env.get("products", ()) == (1, 2, 3)


def test_set_replaces_previous_value():
    env = Env()
    env.set("key", "first")
    env.set("key", "second")
    assert env.get("key") == "second"


def test_environments_have_separate_storage():
    first, second = Env(), Env()
    first.set("key", 7)
    assert second.get("key", 0) == 0
    assert first.get("key", 0) == 7


def test_generated_addresses_are_unique():
    env = Env()
    addresses = [env.generate_address() for _ in range(50)]
    assert len(set(addresses)) == 50


def test_generated_addresses_differ_between_environments():
    assert Env().generate_address() != Env().generate_address()
    first = Env().generate_address()
    assert first == Address(first.value)


def test_address_equality_by_value():
    assert Address("GABC") == Address("GABC")
    assert str(Address("GABC")) == "GABC"


def test_fixed_bytes_accepts_exact_length():
    assert fixed_bytes(bytearray(b"\x01" * 32), 32) == b"\x01" * 32


def test_fixed_bytes_rejects_wrong_length():
    with pytest.raises(ValueError):
        fixed_bytes(b"\x01" * 31, 32)
    with pytest.raises(ValueError):
        fixed_bytes(b"\x01" * 65, 64)


def test_fixed_bytes_rejects_non_bytes():
    with pytest.raises(TypeError):
        fixed_bytes("Laptop", 6)


@pytest.mark.parametrize("value", [0, 1000, -1000, 2**127 - 1, -(2**127)])
def test_check_i128_accepts_in_range(value):
    assert check_i128(value) == value


@pytest.mark.parametrize("value", [2**127, -(2**127) - 1])
def test_check_i128_rejects_out_of_range(value):
    with pytest.raises(OverflowError):
        check_i128(value)


@pytest.mark.parametrize("value", [1.5, "10", True])
def test_check_i128_rejects_non_integers(value):
    with pytest.raises(TypeError):
        check_i128(value)