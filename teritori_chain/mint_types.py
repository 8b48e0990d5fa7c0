"""Mint module state: parameters, minter, genesis and hooks."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from decimal import ROUND_DOWN, ROUND_HALF_EVEN, Decimal, localcontext
from typing import Iterable, Protocol

import yaml

from .address import AddressError, acc_address_from_bech32
from .ledger import Coin, Context
from .vesting import MonthlyVestingAddress, parse_monthly_vesting

MODULE_NAME = "mint"
STORE_KEY = MODULE_NAME
QUERIER_ROUTE = STORE_KEY

MINTER_KEY = b"\x00"
LAST_REDUCTION_BLOCK_KEY = b"\x03"
TEAM_VESTING_MONTH_INFO_KEY = b"\x04"

ATTRIBUTE_KEY_BLOCK_PROVISIONS = "block_provisions"
ATTRIBUTE_BLOCK_NUMBER = "block_number"

DEFAULT_BOND_DENOM = "stake"
DEC_PRECISION = 18

NIL_BLOCK_PROVISIONS = "block provisions was nil in genesis"
NEGATIVE_BLOCK_PROVISIONS = "block provisions should be non-negative"

_DENOM_RE = re.compile(r"[a-zA-Z][a-zA-Z0-9/:._-]{2,127}")
_QUANTUM = Decimal(1).scaleb(-DEC_PRECISION)


class MintError(ValueError):
    """Raised when mint state or parameters are invalid."""


def _dec(value: Decimal | int | str) -> Decimal:
    with localcontext() as ctx:
        ctx.prec = 100
        return Decimal(value).quantize(_QUANTUM, rounding=ROUND_HALF_EVEN)


def _mul(a: Decimal, b: Decimal) -> Decimal:
    with localcontext() as ctx:
        ctx.prec = 100
        return (a * b).quantize(_QUANTUM, rounding=ROUND_HALF_EVEN)


def _truncate(value: Decimal) -> int:
    return int(value.to_integral_value(rounding=ROUND_DOWN))


def _dec_str(value: Decimal) -> str:
    return f"{_dec(value):.{DEC_PRECISION}f}"


@dataclass
class DistributionProportions:
    """Shares of each minted coin sent to each destination."""

    grants_program: Decimal = Decimal(0)
    community_pool: Decimal = Decimal(0)
    usage_incentive: Decimal = Decimal(0)
    staking: Decimal = Decimal(0)
    developer_rewards: Decimal = Decimal(0)

    def total(self) -> Decimal:
        return (
            self.grants_program
            + self.community_pool
            + self.usage_incentive
            + self.staking
            + self.developer_rewards
        )


def _validate_mint_denom(value: object) -> None:
    if not isinstance(value, str):
        raise MintError(f"invalid parameter type: {type(value).__name__}")
    if not value.strip():
        raise MintError("mint denom cannot be blank")
    if not _DENOM_RE.fullmatch(value):
        raise MintError(f"invalid denom: {value}")


def _validate_genesis_block_provisions(value: object) -> None:
    if not isinstance(value, Decimal):
        raise MintError(f"invalid parameter type: {type(value).__name__}")
    if value < 0:
        raise MintError("genesis block provision must be non-negative")


def _validate_reduction_period(value: object) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise MintError(f"invalid parameter type: {type(value).__name__}")
    if value <= 0:
        raise MintError(f"reduction period must be positive: {value}")


def _validate_reduction_factor(value: object) -> None:
    if not isinstance(value, Decimal):
        raise MintError(f"invalid parameter type: {type(value).__name__}")
    if value > 1:
        raise MintError("reduction factor cannot be greater than 1")
    if value < 0:
        raise MintError("reduction factor cannot be negative")


def _validate_distribution_proportions(value: object) -> None:
    if not isinstance(value, DistributionProportions):
        raise MintError(f"invalid parameter type: {type(value).__name__}")
    checks = (
        (value.grants_program, "staking distribution ratio should not be negative"),
        (value.community_pool, "staking distribution ratio should not be negative"),
        (value.usage_incentive, "community pool distribution ratio should not be negative"),
        (value.staking, "staking distribution ratio should not be negative"),
        (value.developer_rewards, "developer rewards distribution ratio should not be negative"),
    )
    for ratio, message in checks:
        if ratio < 0:
            raise MintError(message)
    if value.total() != 1:
        raise MintError("total distributions ratio should be 1")


def _validate_receivers(value: object) -> None:
    if not isinstance(value, (list, tuple)):
        raise MintError(f"invalid parameter type: {type(value).__name__}")


def _validate_start_block(value: object) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise MintError(f"invalid parameter type: {type(value).__name__}")
    if value < 0:
        raise MintError("start block must be non-negative")


def _validate_address(value: object) -> None:
    if not isinstance(value, str):
        raise MintError(f"invalid parameter type: {type(value).__name__}")
    try:
        acc_address_from_bech32(value)
    except AddressError as exc:
        raise MintError(str(exc)) from exc


@dataclass
class Params:
    """Minting parameters."""

    mint_denom: str = DEFAULT_BOND_DENOM
    genesis_block_provisions: Decimal = Decimal(0)
    reduction_period_in_blocks: int = 0
    reduction_factor: Decimal = Decimal(0)
    distribution_proportions: DistributionProportions = field(default_factory=DistributionProportions)
    weighted_developer_rewards_receivers: list[MonthlyVestingAddress] = field(default_factory=list)
    usage_incentive_address: str = ""
    grants_program_address: str = ""
    team_reserve_address: str = ""
    minting_rewards_distribution_start_block: int = 0

    def validate(self) -> None:
        """Raise MintError if any parameter is invalid."""
        _validate_mint_denom(self.mint_denom)
        _validate_genesis_block_provisions(self.genesis_block_provisions)
        _validate_reduction_period(self.reduction_period_in_blocks)
        _validate_reduction_factor(self.reduction_factor)
        _validate_distribution_proportions(self.distribution_proportions)
        _validate_address(self.usage_incentive_address)
        _validate_address(self.grants_program_address)
        _validate_address(self.team_reserve_address)
        _validate_receivers(self.weighted_developer_rewards_receivers)
        _validate_start_block(self.minting_rewards_distribution_start_block)

    def _as_dict(self) -> dict:
        proportions = self.distribution_proportions
        return {
            "mint_denom": self.mint_denom,
            "genesis_block_provisions": _dec_str(self.genesis_block_provisions),
            "reduction_period_in_blocks": self.reduction_period_in_blocks,
            "reduction_factor": _dec_str(self.reduction_factor),
            "distribution_proportions": {
                "grants_program": _dec_str(proportions.grants_program),
                "community_pool": _dec_str(proportions.community_pool),
                "usage_incentive": _dec_str(proportions.usage_incentive),
                "staking": _dec_str(proportions.staking),
                "developer_rewards": _dec_str(proportions.developer_rewards),
            },
            "weighted_developer_rewards_receivers": [
                {"address": r.address, "monthly_amounts": [str(a) for a in r.monthly_amounts]}
                for r in self.weighted_developer_rewards_receivers
            ],
            "usage_incentive_address": self.usage_incentive_address,
            "grants_program_address": self.grants_program_address,
            "team_reserve_address": self.team_reserve_address,
            "minting_rewards_distribution_start_block": self.minting_rewards_distribution_start_block,
        }

    def __str__(self) -> str:
        return yaml.safe_dump(self._as_dict(), sort_keys=False)


def default_params() -> Params:
    """Return the default minting parameters."""
    return Params(
        mint_denom=DEFAULT_BOND_DENOM,
        genesis_block_provisions=Decimal(47_000_000),
        reduction_period_in_blocks=6_307_200,
        reduction_factor=Decimal("0.6666"),
        distribution_proportions=DistributionProportions(
            grants_program=Decimal("0.10"),
            community_pool=Decimal("0.10"),
            usage_incentive=Decimal("0.25"),
            staking=Decimal("0.40"),
            developer_rewards=Decimal("0.15"),
        ),
        weighted_developer_rewards_receivers=parse_monthly_vesting(),
        usage_incentive_address="tori1at6zkjpxleg8nd8u67542fprzgsev6jh5lfzne",
        grants_program_address="tori1a28lq0usqrma2tn5t7vmdg3jnglh3v3qln4ky0",
        team_reserve_address="tori1efcnw3j074urqryseyx4weahr2p5at9lhwcaju",
        minting_rewards_distribution_start_block=0,
    )


@dataclass
class Minter:
    """The current per-block provisions; None means unset."""

    block_provisions: Decimal | None = Decimal(0)

    def validate(self) -> None:
        if self.block_provisions is None:
            raise MintError(NIL_BLOCK_PROVISIONS)
        if self.block_provisions < 0:
            raise MintError(NEGATIVE_BLOCK_PROVISIONS)

    def next_block_provisions(self, params: Params) -> Decimal:
        """Return the provisions after one reduction step."""
        return _mul(self.block_provisions, params.reduction_factor)

    def block_provision(self, params: Params) -> Coin:
        """Return the coin minted for one block."""
        return Coin(params.mint_denom, _truncate(self.block_provisions))

    def to_bytes(self) -> bytes:
        value = None if self.block_provisions is None else _dec_str(self.block_provisions)
        return json.dumps({"block_provisions": value}, sort_keys=True).encode()

    @staticmethod
    def from_bytes(data: bytes) -> Minter:
        try:
            raw = json.loads(data)["block_provisions"]
        except (ValueError, KeyError, TypeError) as exc:
            raise MintError("malformed minter encoding") from exc
        return Minter(None if raw is None else _dec(raw))


def initial_minter() -> Minter:
    """Return a minter with zero provisions."""
    return Minter(Decimal(0))


@dataclass
class TeamVestingMonthInfo:
    """Progress through the monthly team vesting schedule."""

    months_since_genesis: int = 0
    month_started_block: int = 0
    one_month_period_in_blocks: int = 0


@dataclass
class GenesisState:
    """Mint module genesis state."""

    minter: Minter = field(default_factory=initial_minter)
    params: Params = field(default_factory=default_params)
    reduction_started_block: int = 0
    month_info: TeamVestingMonthInfo = field(default_factory=TeamVestingMonthInfo)


def default_genesis_state() -> GenesisState:
    """Return the default genesis state for a new chain."""
    return GenesisState(
        minter=initial_minter(),
        params=default_params(),
        reduction_started_block=0,
        month_info=TeamVestingMonthInfo(one_month_period_in_blocks=525_600),
    )


def validate_genesis(data: GenesisState) -> None:
    """Raise MintError if the genesis parameters or minter are invalid."""
    data.params.validate()
    data.minter.validate()


class MintHooks(Protocol):
    """Callbacks run by the mint module."""

    def after_distribute_minted_coin(self, ctx: Context) -> None: ...


class MultiMintHooks:
    """Runs several hooks in sequence."""

    def __init__(self, *hooks: MintHooks) -> None:
        self.hooks: tuple[MintHooks, ...] = tuple(hooks)

    @classmethod
    def of(cls, hooks: Iterable[MintHooks]) -> MultiMintHooks:
        return cls(*hooks)

    def after_distribute_minted_coin(self, ctx: Context) -> None:
        for hook in self.hooks:
            hook.after_distribute_minted_coin(ctx)