"""Mint keeper: per-block minting, reward distribution and stored mint state."""

from __future__ import annotations

import copy
import logging
from dataclasses import replace
from decimal import ROUND_DOWN, ROUND_HALF_EVEN, Decimal, localcontext
from functools import lru_cache
from typing import Iterable, Sequence

from .address import BECH32_PREFIX, acc_address_from_bech32, bech32_encode, module_address
from .ledger import Bank, Coin, Context
from .mint_types import (
    ATTRIBUTE_BLOCK_NUMBER,
    ATTRIBUTE_KEY_BLOCK_PROVISIONS,
    DEC_PRECISION,
    MODULE_NAME,
    GenesisState,
    MintError,
    MintHooks,
    Minter,
    Params,
    TeamVestingMonthInfo,
)
from .vesting import MonthlyVestingAddress

ATTRIBUTE_KEY_AMOUNT = "amount"

_EMPTY_ADDRESS_RECEIVER = ""
_QUANTUM = Decimal(1).scaleb(-DEC_PRECISION)


def _dec_str(value: Decimal) -> str:
    return f"{value:.{DEC_PRECISION}f}"


class InvalidRatioError(MintError):
    """Raised when a distribution ratio exceeds one."""

    def __init__(self, ratio: Decimal) -> None:
        self.ratio = ratio
        super().__init__(f"mint allocation ratio ({_dec_str(ratio)}) is greater than 1")


def _proportion(coin: Coin, ratio: Decimal) -> Coin:
    if ratio > 1:
        raise InvalidRatioError(ratio)
    with localcontext() as ctx:
        ctx.prec = 100
        product = (Decimal(coin.amount) * ratio).quantize(_QUANTUM, rounding=ROUND_HALF_EVEN)
    return Coin(coin.denom, int(product.to_integral_value(rounding=ROUND_DOWN)))


def _coins(*coins: Coin) -> tuple[Coin, ...]:
    return tuple(c for c in coins if not c.is_zero())


@lru_cache(maxsize=1024)
def _account(address: str) -> str:
    acc_address_from_bech32(address)
    return address


class MintKeeper:
    """Holds the mint module's state and mints and distributes block rewards."""

    def __init__(self, bank: Bank, fee_collector_name: str) -> None:
        self.bank = bank
        self.fee_collector_name = fee_collector_name
        self.address = bech32_encode(BECH32_PREFIX, module_address(MODULE_NAME))
        self.logger = logging.getLogger(f"x/{MODULE_NAME}")
        self._params = Params()
        self._minter: Minter | None = None
        self._last_reduction_block = 0
        self._month_info = TeamVestingMonthInfo()
        self._hooks: MintHooks | None = None

    # stored state

    @property
    def params(self) -> Params:
        return copy.deepcopy(self._params)

    @params.setter
    def params(self, value: Params) -> None:
        self._params = copy.deepcopy(value)

    @property
    def minter(self) -> Minter:
        if self._minter is None:
            raise MintError("stored minter should not have been nil")
        return replace(self._minter)

    @minter.setter
    def minter(self, value: Minter) -> None:
        self._minter = replace(value)

    @property
    def last_reduction_block_num(self) -> int:
        return self._last_reduction_block

    @last_reduction_block_num.setter
    def last_reduction_block_num(self, value: int) -> None:
        self._last_reduction_block = value

    @property
    def month_info(self) -> TeamVestingMonthInfo:
        return replace(self._month_info)

    @month_info.setter
    def month_info(self, value: TeamVestingMonthInfo) -> None:
        self._month_info = replace(value)

    def set_hooks(self, hooks: MintHooks) -> MintKeeper:
        """Install the hooks; they may be set only once."""
        if self._hooks is not None:
            raise MintError("cannot set mint hooks twice")
        self._hooks = hooks
        return self

    def block_provisions(self) -> Decimal:
        """Return the current per-block provisions."""
        return self.minter.block_provisions

    # block processing

    def end_blocker(self, ctx: Context) -> None:
        """Mint this block's provisions and distribute them."""
        params = self._params
        block = ctx.block_height
        start = params.minting_rewards_distribution_start_block

        if block < start:
            return
        if block == start:
            self._last_reduction_block = block

        minter = self.minter
        if block >= params.reduction_period_in_blocks + self._last_reduction_block:
            minter = Minter(minter.next_block_provisions(params))
            self.minter = minter
            self._last_reduction_block = block

        month_info = self.month_info
        if month_info.month_started_block < start:
            month_info.month_started_block = start
        if block >= month_info.one_month_period_in_blocks + month_info.month_started_block:
            month_info.months_since_genesis += 1
            month_info.month_started_block = block
            self._month_info = month_info

        minted = minter.block_provision(params)
        self.mint_coins(_coins(minted))
        self.distribute_minted_coin(ctx, minted)

        ctx.emit(
            MODULE_NAME,
            [
                (ATTRIBUTE_BLOCK_NUMBER, str(block)),
                (ATTRIBUTE_KEY_BLOCK_PROVISIONS, _dec_str(minter.block_provisions)),
                (ATTRIBUTE_KEY_AMOUNT, str(minted.amount)),
            ],
        )

    def mint_coins(self, coins: Iterable[Coin]) -> None:
        """Mint coins into the mint module account; nothing happens for no coins."""
        coins = tuple(coins)
        if not coins:
            return
        self.bank.mint_coins(MODULE_NAME, coins)

    def distribute_minted_coin(self, ctx: Context, minted_coin: Coin) -> None:
        """Send shares of the minted coin to each destination; the rest funds the community pool."""
        params = self._params
        proportions = params.distribution_proportions

        grants = self._distribute_to_address(
            params.grants_program_address, minted_coin, proportions.grants_program
        )
        usage = self._distribute_to_address(
            params.usage_incentive_address, minted_coin, proportions.usage_incentive
        )
        staking = self._distribute_to_module(self.fee_collector_name, minted_coin, proportions.staking)
        developer = self._distribute_developer_rewards(
            params,
            minted_coin,
            proportions.developer_rewards,
            params.weighted_developer_rewards_receivers,
        )

        community = minted_coin.amount - grants - usage - staking - developer
        self.bank.fund_community_pool(_coins(Coin(params.mint_denom, community)), self.address)

        if self._hooks is not None:
            self._hooks.after_distribute_minted_coin(ctx)

    def _distribute_to_address(self, recipient: str, minted: Coin, ratio: Decimal) -> int:
        share = _proportion(minted, ratio)
        self.bank.send_from_module_to_account(MODULE_NAME, _account(recipient), _coins(share))
        return share.amount

    def _distribute_to_module(self, recipient: str, minted: Coin, ratio: Decimal) -> int:
        share = _proportion(minted, ratio)
        self.bank.send_from_module_to_module(MODULE_NAME, recipient, _coins(share))
        return share.amount

    def _distribute_developer_rewards(
        self,
        params: Params,
        total_minted: Coin,
        ratio: Decimal,
        receivers: Sequence[MonthlyVestingAddress],
    ) -> int:
        total = _proportion(total_minted, ratio)
        month = self._month_info
        vested = 0
        for receiver in receivers:
            if len(receiver.monthly_amounts) <= month.months_since_genesis:
                continue
            portion = receiver.monthly_amounts[month.months_since_genesis] // month.one_month_period_in_blocks
            if portion == 0:
                continue
            if receiver.address != _EMPTY_ADDRESS_RECEIVER:
                self.bank.send_from_module_to_account(
                    MODULE_NAME, _account(receiver.address), _coins(Coin(params.mint_denom, portion))
                )
                vested += portion

        remaining = total - Coin(params.mint_denom, vested)
        if remaining.is_positive():
            self.bank.send_from_module_to_account(
                MODULE_NAME, _account(params.team_reserve_address), (remaining,)
            )
        return total.amount

    # genesis

    def init_genesis(self, data: GenesisState | None) -> None:
        """Load the module state from genesis."""
        if data is None:
            raise MintError("nil mint genesis state")
        data.minter.block_provisions = data.params.genesis_block_provisions
        self.minter = data.minter
        self.params = data.params
        self._last_reduction_block = data.reduction_started_block
        self.month_info = data.month_info

    def export_genesis(self) -> GenesisState:
        """Return the current module state as a genesis state."""
        params = self.params
        if params.weighted_developer_rewards_receivers is None:
            params.weighted_developer_rewards_receivers = []
        return GenesisState(
            minter=self.minter,
            params=params,
            reduction_started_block=self._last_reduction_block,
            month_info=self.month_info,
        )