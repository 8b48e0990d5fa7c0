import pytest

from teritori_chain.address import BECH32_PREFIX, bech32_encode, module_address
from teritori_chain.ledger import (
    Bank,
    Coin,
    Context,
    InsufficientFundsError,
    parse_coin,
    parse_coins,
)

USER = "tori1zyakv8ny9p5esrpv3rgls707rd9anjzla2q7vj"


def _module(name):
    return bech32_encode(BECH32_PREFIX, module_address(name))


def test_coin_arithmetic():
    a = Coin("utori", 10)
    assert (a + Coin("utori", 5)).amount == 15
    assert (a - Coin("utori", 10)).is_zero()
    assert a.is_positive()
    with pytest.raises(ValueError):
        a - Coin("utori", 11)
    with pytest.raises(ValueError):
        a + Coin("uatom", 1)


def test_parse_coin_round_trip():
    coin = parse_coin("100utori")
    assert coin == Coin("utori", 100)
    assert str(coin) == "100utori"
    with pytest.raises(ValueError):
        parse_coin("utori")


def test_parse_coins_sorts_and_drops_zero():
    assert parse_coins("5bbb,0ccc,3aaa") == (Coin("aaa", 3), Coin("bbb", 5))
    with pytest.raises(ValueError):
        parse_coins("1aaa,2aaa")


def test_context_events_shared():
    ctx = Context()
    later = ctx.with_block_height(10)
    later.emit("mint", {"amount": "5"})
    assert later.block_height == 10
    assert ctx.block_height == 0
    assert ctx.events[0].attributes == (("amount", "5"),)


def test_bank_flows():
    bank = Bank()
    bank.mint_coins("mint", [Coin("utori", 100)])
    assert bank.balance(_module("mint"), "utori").amount == 100
    bank.send_from_module_to_account("mint", USER, [Coin("utori", 40)])
    bank.send_from_module_to_module("mint", "fee_collector", [Coin("utori", 10)])
    bank.send_from_account_to_module(USER, "airdrop", [Coin("utori", 15)])
    bank.fund_community_pool([Coin("utori", 20)], _module("mint"))
    assert bank.balance(USER, "utori").amount == 25
    assert bank.balance(_module("fee_collector"), "utori").amount == 10
    assert bank.balance(_module("airdrop"), "utori").amount == 15
    assert bank.balance(_module("mint"), "utori").amount == 30
    assert bank.community_pool["utori"] == 20
    bank.burn_coins("mint", [Coin("utori", 30)])
    assert bank.supply["utori"] == 70


def test_insufficient_funds():
    bank = Bank()
    with pytest.raises(InsufficientFundsError):
        bank.send_from_module_to_account("mint", USER, [Coin("utori", 1)])
    assert bank.balance(USER, "utori").amount == 0