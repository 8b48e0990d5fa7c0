"""Coins, execution context and an in-memory bank of balances."""

from __future__ import annotations

import re
from collections import defaultdict
from dataclasses import dataclass, field, replace
from typing import Iterable, Mapping

from .address import BECH32_PREFIX, bech32_encode, module_address

_COIN_RE = re.compile(r"^\s*([0-9]+)\s*([a-zA-Z][a-zA-Z0-9/:._-]{2,127})\s*$")

DISTRIBUTION_MODULE = "distribution"


@dataclass(frozen=True)
class Coin:
    """An integer amount of a single denomination."""

    denom: str
    amount: int = 0

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError(f"negative coin amount: {self.amount}")

    def is_zero(self) -> bool:
        return self.amount == 0

    def is_positive(self) -> bool:
        return self.amount > 0

    def _check(self, other: Coin) -> None:
        if other.denom != self.denom:
            raise ValueError(f"invalid coin denominations; {self.denom}, {other.denom}")

    def __add__(self, other: Coin) -> Coin:
        self._check(other)
        return Coin(self.denom, self.amount + other.amount)

    def __sub__(self, other: Coin) -> Coin:
        self._check(other)
        if other.amount > self.amount:
            raise ValueError("negative coin amount")
        return Coin(self.denom, self.amount - other.amount)

    def __str__(self) -> str:
        return f"{self.amount}{self.denom}"


def parse_coin(text: str) -> Coin:
    """Parse a coin such as ``100utori``."""
    match = _COIN_RE.match(text)
    if not match:
        raise ValueError(f"invalid coin expression: {text}")
    return Coin(match.group(2), int(match.group(1)))


def parse_coins(text: str) -> tuple[Coin, ...]:
    """Parse comma-separated coins, dropping zeros and sorting by denom."""
    if not text.strip():
        return ()
    coins = [parse_coin(part) for part in text.split(",")]
    denoms = [c.denom for c in coins]
    if len(set(denoms)) != len(denoms):
        raise ValueError(f"duplicate denomination in {text}")
    return tuple(sorted((c for c in coins if not c.is_zero()), key=lambda c: c.denom))


@dataclass(frozen=True)
class Event:
    type: str
    attributes: tuple[tuple[str, str], ...] = ()


@dataclass
class Context:
    """Block height and the events emitted while processing it."""

    block_height: int = 0
    events: list[Event] = field(default_factory=list)

    def emit(self, event_type: str, attributes: Mapping[str, str] | Iterable[tuple[str, str]] = ()) -> Event:
        pairs = attributes.items() if isinstance(attributes, Mapping) else attributes
        event = Event(event_type, tuple((str(k), str(v)) for k, v in pairs))
        self.events.append(event)
        return event

    def with_block_height(self, height: int) -> Context:
        return replace(self, block_height=height)


class InsufficientFundsError(ValueError):
    """Raised when an account holds less than it is asked to pay."""


def _module_account(name: str) -> str:
    return bech32_encode(BECH32_PREFIX, module_address(name))


class Bank:
    """Balances keyed by bech32 address, with named module accounts."""

    def __init__(self) -> None:
        self._balances: dict[tuple[str, str], int] = defaultdict(int)
        self.supply: dict[str, int] = defaultdict(int)
        self.community_pool: dict[str, int] = defaultdict(int)

    def balance(self, address: str, denom: str) -> Coin:
        return Coin(denom, self._balances.get((address, denom), 0))

    def _credit(self, address: str, coins: Iterable[Coin]) -> None:
        for coin in coins:
            self._balances[(address, coin.denom)] += coin.amount

    def _debit(self, address: str, coins: Iterable[Coin]) -> None:
        coins = list(coins)
        for coin in coins:
            have = self._balances.get((address, coin.denom), 0)
            if have < coin.amount:
                raise InsufficientFundsError(
                    f"{have}{coin.denom} is smaller than {coin.amount}{coin.denom}"
                )
        for coin in coins:
            self._balances[(address, coin.denom)] -= coin.amount

    def _transfer(self, sender: str, recipient: str, coins: Iterable[Coin]) -> None:
        coins = list(coins)
        self._debit(sender, coins)
        self._credit(recipient, coins)

    def mint_coins(self, module: str, coins: Iterable[Coin]) -> None:
        coins = list(coins)
        self._credit(_module_account(module), coins)
        for coin in coins:
            self.supply[coin.denom] += coin.amount

    def burn_coins(self, module: str, coins: Iterable[Coin]) -> None:
        coins = list(coins)
        self._debit(_module_account(module), coins)
        for coin in coins:
            self.supply[coin.denom] -= coin.amount

    def send_from_module_to_account(self, module: str, address: str, coins: Iterable[Coin]) -> None:
        self._transfer(_module_account(module), address, coins)

    def send_from_module_to_module(self, sender: str, recipient: str, coins: Iterable[Coin]) -> None:
        self._transfer(_module_account(sender), _module_account(recipient), coins)

    def send_from_account_to_module(self, address: str, module: str, coins: Iterable[Coin]) -> None:
        self._transfer(address, _module_account(module), coins)

    def fund_community_pool(self, coins: Iterable[Coin], sender: str) -> None:
        coins = list(coins)
        self._transfer(sender, _module_account(DISTRIBUTION_MODULE), coins)
        for coin in coins:
            self.community_pool[coin.denom] += coin.amount