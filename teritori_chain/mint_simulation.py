"""Randomized mint genesis for simulations and a store decoder for mint entries."""

from __future__ import annotations

import random
from decimal import Decimal
from typing import NamedTuple

from .mint_types import (
    DEC_PRECISION,
    DEFAULT_BOND_DENOM,
    MINTER_KEY,
    DistributionProportions,
    GenesisState,
    MintError,
    Minter,
    Params,
    TeamVestingMonthInfo,
)
from .vesting import MonthlyVestingAddress

BLOCK_PROVISIONS_KEY = "genesis_block_provisions"
REDUCTION_FACTOR_KEY = "reduction_factor"
REDUCTION_PERIOD_IN_BLOCKS_KEY = "reduction_period_in_blocks"
MINTING_REWARDS_DISTRIBUTION_START_BLOCK_KEY = "minting_rewards_distribution_start_block"

MAX_INT64 = 2**63 - 1

_DEV_REWARDS_ADDRESS = "tori1g2escsu26508tgrpv865d80d62pvmw69je2ztn"


class KVPair(NamedTuple):
    """A raw store entry."""

    key: bytes
    value: bytes


def _distribution_proportions() -> DistributionProportions:
    return DistributionProportions(
        grants_program=Decimal("0.10"),
        community_pool=Decimal("0.10"),
        usage_incentive=Decimal("0.25"),
        staking=Decimal("0.40"),
        developer_rewards=Decimal("0.15"),
    )


def _weighted_dev_reward_receivers() -> list[MonthlyVestingAddress]:
    return [
        MonthlyVestingAddress(_DEV_REWARDS_ADDRESS, (amount,) * 3)
        for amount in (7000, 2000, 1000)
    ]


def randomized_genesis_state(rng: random.Random) -> GenesisState:
    """Build a mint genesis state with randomly drawn provisions and schedule."""
    block_provisions = Decimal(rng.randrange(MAX_INT64))
    reduction_factor = Decimal(rng.randrange(10)) / 10
    reduction_period_in_blocks = rng.randrange(MAX_INT64)
    start_block = rng.randrange(MAX_INT64)
    reduction_started_block = rng.randrange(MAX_INT64)

    params = Params(
        mint_denom=DEFAULT_BOND_DENOM,
        genesis_block_provisions=block_provisions,
        reduction_period_in_blocks=reduction_period_in_blocks,
        reduction_factor=reduction_factor,
        distribution_proportions=_distribution_proportions(),
        weighted_developer_rewards_receivers=_weighted_dev_reward_receivers(),
        minting_rewards_distribution_start_block=start_block,
    )
    return GenesisState(
        minter=Minter(block_provisions),
        params=params,
        reduction_started_block=reduction_started_block,
        month_info=TeamVestingMonthInfo(),
    )


def _format_minter(minter: Minter) -> str:
    value = minter.block_provisions
    text = "<nil>" if value is None else f"{value:.{DEC_PRECISION}f}"
    return "{" + text + "}"


def decode_store(pair_a, pair_b) -> str:
    """Describe two versions of a mint store entry side by side."""
    key_a, value_a = pair_a
    _, value_b = pair_b
    if bytes(key_a) == MINTER_KEY:
        minter_a = Minter.from_bytes(value_a)
        minter_b = Minter.from_bytes(value_b)
        return f"{_format_minter(minter_a)}\n{_format_minter(minter_b)}"
    raise MintError(f"invalid mint key {bytes(key_a).hex().upper()}")