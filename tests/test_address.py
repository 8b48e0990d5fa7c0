import pytest

from teritori_chain.address import (
    BECH32_PREFIX,
    AddressError,
    acc_address_from_bech32,
    bech32_decode,
    bech32_encode,
    module_address,
)

SOURCE_ADDRESSES = [
    "tori1zyakv8ny9p5esrpv3rgls707rd9anjzla2q7vj",
    "tori1at6zkjpxleg8nd8u67542fprzgsev6jh5lfzne",
    "tori12ezu9ms7sypmasdvxxk6x8q4nu9ndhsje7tm70",
]


def test_empty_data_vector():
    assert bech32_decode("a12uel5l") == ("a", b"")
    assert bech32_encode("a", b"") == "a12uel5l"


@pytest.mark.parametrize("address", SOURCE_ADDRESSES)
def test_round_trip_of_known_addresses(address):
    hrp, data = bech32_decode(address)
    assert hrp == "tori"
    assert len(data) == 20
    assert bech32_encode(hrp, data) == address
    assert acc_address_from_bech32(address) == data


def test_bad_checksum():
    address = SOURCE_ADDRESSES[0]
    broken = address[:-1] + ("q" if address[-1] != "q" else "p")
    with pytest.raises(AddressError):
        bech32_decode(broken)


def test_mixed_case_rejected():
    with pytest.raises(AddressError):
        bech32_decode("Tori1zyakv8ny9p5esrpv3rgls707rd9anjzla2q7vj")


def test_wrong_prefix():
    other = bech32_encode("cosmos", bytes(range(20)))
    with pytest.raises(AddressError):
        acc_address_from_bech32(other)


def test_empty_address():
    with pytest.raises(AddressError):
        acc_address_from_bech32("  ")


def test_module_address():
    address = module_address("mint")
    assert len(address) == 20
    assert address == module_address("mint")
    assert address != module_address("airdrop")
    encoded = bech32_encode(BECH32_PREFIX, address)
    assert acc_address_from_bech32(encoded) == address