from decimal import Decimal

import pytest

from teritori_chain.address import BECH32_PREFIX, AddressError, bech32_encode, module_address
from teritori_chain.ledger import Bank, Coin, Context
from teritori_chain.mint_keeper import InvalidRatioError, MintKeeper
from teritori_chain.mint_types import (
    DistributionProportions,
    GenesisState,
    MintError,
    Minter,
    Params,
    TeamVestingMonthInfo,
    default_genesis_state,
    default_params,
)
from teritori_chain.vesting import MonthlyVestingAddress

FEE_COLLECTOR = "fee_collector"


def _addr(n):
    return bech32_encode(BECH32_PREFIX, bytes([n]) * 20)


def _module(name):
    return bech32_encode(BECH32_PREFIX, module_address(name))


def _setup():
    bank = Bank()
    keeper = MintKeeper(bank, FEE_COLLECTOR)
    keeper.init_genesis(default_genesis_state())
    return bank, keeper


def _equal_proportions():
    fifth = Decimal("0.2")
    return DistributionProportions(fifth, fifth, fifth, fifth, fifth)


def _run_blocks(keeper, ctx, count):
    for _ in range(count):
        keeper.end_blocker(ctx)
        ctx = ctx.with_block_height(ctx.block_height + 1)
    return ctx


GRANTS, USAGE, DEV1, DEV2, RESERVE = (_addr(i) for i in range(1, 6))


def test_last_reduction_block_num_get_set():
    _, keeper = _setup()
    assert keeper.last_reduction_block_num == 0
    keeper.last_reduction_block_num = 100
    assert keeper.last_reduction_block_num == 100


def test_team_vesting_month_info_get_set():
    _, keeper = _setup()
    assert keeper.month_info == default_genesis_state().month_info
    new_info = TeamVestingMonthInfo(
        months_since_genesis=1, month_started_block=1, one_month_period_in_blocks=10000
    )
    keeper.month_info = new_info
    assert keeper.month_info == new_info


def test_minter_get_set():
    _, keeper = _setup()
    assert keeper.minter.block_provisions == default_genesis_state().params.genesis_block_provisions
    keeper.minter = Minter(Decimal(1))
    assert keeper.minter == Minter(Decimal(1))
    assert keeper.block_provisions() == Decimal(1)


def test_params_get_set():
    _, keeper = _setup()
    addr = _addr(9)
    params = Params(
        mint_denom="utori",
        genesis_block_provisions=Decimal(1000),
        reduction_period_in_blocks=86400,
        reduction_factor=Decimal("0.5"),
        distribution_proportions=_equal_proportions(),
        weighted_developer_rewards_receivers=[
            MonthlyVestingAddress("", (7000, 7000, 7000)),
        ],
        usage_incentive_address=addr,
        grants_program_address=addr,
        team_reserve_address=addr,
        minting_rewards_distribution_start_block=1,
    )
    keeper.params = params
    assert keeper.params == params


def test_missing_minter_raises():
    keeper = MintKeeper(Bank(), FEE_COLLECTOR)
    with pytest.raises(MintError, match="minter"):
        keeper.end_blocker(Context(block_height=0))


def test_init_genesis_none_raises():
    keeper = MintKeeper(Bank(), FEE_COLLECTOR)
    with pytest.raises(MintError, match="nil mint genesis state"):
        keeper.init_genesis(None)


def test_export_genesis_round_trip():
    _, keeper = _setup()
    keeper.last_reduction_block_num = 42
    exported = keeper.export_genesis()
    assert exported.reduction_started_block == 42
    assert exported.minter.block_provisions == Decimal(47_000_000)
    assert exported.params == default_params()
    assert exported.month_info.one_month_period_in_blocks == 525_600

    other = MintKeeper(Bank(), FEE_COLLECTOR)
    other.init_genesis(exported)
    assert other.export_genesis() == exported


def _distribution_params():
    return Params(
        mint_denom="utori",
        genesis_block_provisions=Decimal(1000),
        reduction_period_in_blocks=86400,
        reduction_factor=Decimal("0.5"),
        distribution_proportions=_equal_proportions(),
        weighted_developer_rewards_receivers=[
            MonthlyVestingAddress(DEV1, (7_000_000, 7_000_000, 7_000_000)),
            MonthlyVestingAddress(DEV2, (3_000_000, 3_000_000, 3_000_000)),
        ],
        usage_incentive_address=USAGE,
        grants_program_address=GRANTS,
        team_reserve_address=RESERVE,
        minting_rewards_distribution_start_block=1,
    )


@pytest.mark.parametrize("month_index", [0, 1])
def test_distribute_minted_coin(month_index):
    bank, keeper = _setup()
    keeper.params = _distribution_params()
    keeper.month_info = TeamVestingMonthInfo(
        months_since_genesis=month_index, month_started_block=1, one_month_period_in_blocks=43200
    )
    minted = Coin("utori", 1_000_000)
    keeper.mint_coins([minted])
    keeper.distribute_minted_coin(Context(), minted)

    assert bank.balance(GRANTS, "utori") == Coin("utori", 200_000)
    assert bank.balance(USAGE, "utori") == Coin("utori", 200_000)
    assert bank.balance(_module(FEE_COLLECTOR), "utori") == Coin("utori", 200_000)
    assert bank.community_pool["utori"] == 200_000
    assert bank.balance(DEV1, "utori") == Coin("utori", 162)
    assert bank.balance(DEV2, "utori") == Coin("utori", 69)
    assert bank.balance(RESERVE, "utori") == Coin("utori", 199_769)
    assert bank.balance(_module("mint"), "utori") == Coin("utori", 0)


def test_distribute_rejects_ratio_above_one():
    _, keeper = _setup()
    params = _distribution_params()
    params.distribution_proportions.grants_program = Decimal("1.5")
    keeper.params = params
    minted = Coin("utori", 1000)
    keeper.mint_coins([minted])
    with pytest.raises(InvalidRatioError, match="greater than 1"):
        keeper.distribute_minted_coin(Context(), minted)


def test_distribute_rejects_bad_address():
    _, keeper = _setup()
    params = _distribution_params()
    params.grants_program_address = "cosmos1invalid"
    keeper.params = params
    minted = Coin("utori", 1000)
    keeper.mint_coins([minted])
    with pytest.raises(AddressError):
        keeper.distribute_minted_coin(Context(), minted)


def test_mint_coins_empty_mints_nothing():
    bank, keeper = _setup()
    keeper.mint_coins([])
    assert dict(bank.supply) == {}


def test_hooks_called_and_set_once():
    _, keeper = _setup()
    calls = []

    class Recorder:
        def after_distribute_minted_coin(self, ctx):
            calls.append(ctx.block_height)

    keeper.set_hooks(Recorder())
    with pytest.raises(MintError, match="twice"):
        keeper.set_hooks(Recorder())

    keeper.params = _distribution_params()
    keeper.month_info = TeamVestingMonthInfo(0, 1, 43200)
    minted = Coin("utori", 1000)
    keeper.mint_coins([minted])
    keeper.distribute_minted_coin(Context(block_height=7), minted)
    assert calls == [7]


def test_end_blocker():
    bank, keeper = _setup()
    genesis_provisions = keeper.params.genesis_block_provisions
    params = Params(
        mint_denom="utori",
        genesis_block_provisions=genesis_provisions,
        reduction_period_in_blocks=4000,
        reduction_factor=Decimal("0.5"),
        distribution_proportions=_equal_proportions(),
        weighted_developer_rewards_receivers=[
            MonthlyVestingAddress(DEV1, (6000, 6000, 6000)),
            MonthlyVestingAddress(DEV2, (4000, 4000, 4000)),
        ],
        usage_incentive_address=USAGE,
        grants_program_address=GRANTS,
        team_reserve_address=RESERVE,
        minting_rewards_distribution_start_block=10,
    )
    keeper.params = params
    keeper.month_info = TeamVestingMonthInfo(
        months_since_genesis=1, month_started_block=1, one_month_period_in_blocks=4000
    )
    assert keeper.minter.block_provisions == genesis_provisions

    ctx = Context()
    keeper.end_blocker(ctx)
    assert bank.balance(GRANTS, "utori") == Coin("utori", 0)
    assert keeper.last_reduction_block_num == 0
    assert keeper.minter.block_provisions == genesis_provisions
    assert keeper.month_info.month_started_block == 1
    assert keeper.month_info.months_since_genesis == 1
    assert ctx.events == []

    ctx = ctx.with_block_height(10)
    keeper.end_blocker(ctx)
    assert keeper.last_reduction_block_num == 10
    assert bank.balance(GRANTS, "utori") == Coin("utori", 9_400_000)
    assert keeper.minter.block_provisions == genesis_provisions
    assert keeper.month_info.month_started_block == 1
    assert keeper.month_info.months_since_genesis == 1
    event = ctx.events[-1]
    assert event.type == "mint"
    assert dict(event.attributes) == {
        "block_number": "10",
        "block_provisions": "47000000.000000000000000000",
        "amount": "47000000",
    }

    ctx = ctx.with_block_height(ctx.block_height + params.reduction_period_in_blocks)
    keeper.end_blocker(ctx)
    assert keeper.last_reduction_block_num == 10 + params.reduction_period_in_blocks
    assert bank.balance(GRANTS, "utori") == Coin("utori", 14_100_000)
    assert keeper.minter.block_provisions == Decimal(23_500_000)
    assert keeper.month_info.month_started_block == 10 + params.reduction_period_in_blocks
    assert keeper.month_info.months_since_genesis == 2


def test_end_blocker_90_months_with_default_genesis():
    bank, keeper = _setup()
    month_info = keeper.month_info
    month_info.one_month_period_in_blocks = 10
    keeper.month_info = month_info

    params = keeper.params
    params.minting_rewards_distribution_start_block = 10
    dev1 = params.weighted_developer_rewards_receivers[0].address
    dev2 = params.weighted_developer_rewards_receivers[1].address
    keeper.params = params

    minter = keeper.minter
    minter.block_provisions = minter.block_provisions * Decimal(525_600 // month_info.one_month_period_in_blocks)
    keeper.minter = minter

    _run_blocks(keeper, Context(), 90 * month_info.one_month_period_in_blocks)

    assert str(bank.balance(dev1, params.mint_denom)) == str(Coin(params.mint_denom, 3_000_003_280_000))
    assert str(bank.balance(dev2, params.mint_denom)) == str(Coin(params.mint_denom, 6_000_006_530_000))


def test_end_blocker_90_months():
    bank, keeper = _setup()
    month_info = keeper.month_info
    month_info.one_month_period_in_blocks = 1000
    keeper.month_info = month_info

    params = keeper.params
    params.weighted_developer_rewards_receivers = [
        MonthlyVestingAddress(DEV1, (6000, 6000, 6000)),
        MonthlyVestingAddress(DEV2, (4000, 4000, 4000)),
    ]
    keeper.params = params

    _run_blocks(keeper, Context(), 90 * month_info.one_month_period_in_blocks)

    assert bank.balance(DEV1, params.mint_denom) == Coin(params.mint_denom, 18000)
    assert bank.balance(DEV2, params.mint_denom) == Coin(params.mint_denom, 12000)


def test_export_genesis_is_a_copy():
    _, keeper = _setup()
    exported = keeper.export_genesis()
    exported.params.mint_denom = "changed"
    exported.month_info.months_since_genesis = 99
    assert keeper.params.mint_denom == default_params().mint_denom
    assert keeper.month_info.months_since_genesis == 0
    assert isinstance(exported, GenesisState)
    assert exported.params.mint_denom == "changed"