# teritori-chain

`teritori_chain` models the mint module of a Cosmos-style blockchain in plain
Python: block-by-block token issuance with periodic reduction of the block
reward, a fixed split of every minted coin between grants, usage incentives,
staking, developer rewards and the community pool, and monthly vesting for
team members.

Everything runs in memory. A small bank ledger stands in for accounts and
module balances, so you can drive a long run of blocks and inspect the
balances that result.

## Requirements

Python 3.10 or later. The package depends on `pycryptodome` (Keccak and
RIPEMD-160 hashing) and `pyyaml` (rendering of parameters).

## Modules

| Module | What it holds |
| --- | --- |
| `teritori_chain.address` | bech32 encoding and decoding, account and module addresses |
| `teritori_chain.secp256k1` | public-key recovery, signature checks, Ethereum and Cosmos addresses |
| `teritori_chain.ledger` | `Coin`, `Event`, `Context` and the in-memory `Bank` |
| `teritori_chain.vesting` | the built-in team vesting table (`parse_monthly_vesting`) |
| `teritori_chain.mint_types` | `Params`, `DistributionProportions`, `Minter`, `TeamVestingMonthInfo`, `GenesisState`, hooks and validation |
| `teritori_chain.mint_keeper` | `MintKeeper`: minting, distribution and end-of-block processing |
| `teritori_chain.mint_simulation` | randomized mint genesis and decoding of stored minter entries |

## Coins

```python
from teritori_chain.ledger import parse_coin, parse_coins

amount = parse_coin("1000000utori")
claimed = parse_coin("250000utori")
print(amount - claimed)             # 750000utori
print((amount - amount).is_zero())  # True

coins = parse_coins("10utori,5stake")  # zeros dropped, sorted by denom
```

Subtracting more than a coin holds, or mixing denominations, raises
`ValueError`. `Bank` keeps balances by bech32 address; module accounts are
derived from the module name with `address.module_address`. Paying out more
than an account holds raises `InsufficientFundsError`. `Bank.supply` and
`Bank.community_pool` track minted supply and community pool funds per denom.

## Minting

A `MintKeeper` works against a `Bank`. Load a genesis state, then call
`end_blocker` once per block with a `Context` carrying the block height:

```python
from teritori_chain.ledger import Bank, Context
from teritori_chain.mint_keeper import MintKeeper
from teritori_chain.mint_types import default_genesis_state

bank = Bank()
keeper = MintKeeper(bank, "fee_collector")
keeper.init_genesis(default_genesis_state())

print(keeper.block_provisions())    # 47000000

ctx = Context(block_height=0)
keeper.end_blocker(ctx)
params = keeper.params
print(bank.balance(params.grants_program_address, params.mint_denom))  # 4700000stake
```

Blocks before `minting_rewards_distribution_start_block` mint nothing. From
then on every block mints the truncated block provision and splits it
according to `DistributionProportions`: grants and usage incentives go to
their addresses, the staking share to the fee collector module, the developer
share to the vesting receivers, and the remainder funds the community pool.
Each time `reduction_period_in_blocks` has passed since the last reduction,
the provision is multiplied by `reduction_factor`.

Team members listed in the vesting table receive their amount for the current
month divided by `one_month_period_in_blocks` on every block; whatever of the
developer share is left goes to `team_reserve_address`. Receivers with an
empty address are skipped and their portion is left for the reserve. The
month advances when a month's worth of blocks has passed.

Each processed block emits a `mint` event on the context carrying the block
number, the block provisions and the minted amount.

The keeper's stored state is exposed as the properties `params`, `minter`,
`last_reduction_block_num` and `month_info`; each may also be assigned.
`export_genesis` returns the current state for a later `init_genesis`.
A distribution ratio above one raises `InvalidRatioError`; invalid
parameters found by `Params.validate` or `validate_genesis` raise `MintError`.

Hooks that must run after each distribution are attached once with
`set_hooks`; several can be combined with `MultiMintHooks`.

## Simulation helpers

`mint_simulation.randomized_genesis_state(random.Random(seed))` draws a
genesis state with random provisions, reduction factor, reduction period and
start blocks. `decode_store(pair_a, pair_b)` renders two stored minter
entries, one per line, and raises `MintError` for any other key.

## Keys and addresses

`address.bech32_encode` and `bech32_decode` convert between bytes and bech32
strings; `acc_address_from_bech32` accepts only the `tori` prefix.
`secp256k1.recover` recovers a public key from a 65-byte recoverable
signature, `verify` checks a 64-byte low-S signature, and `ethereum_address`
and `cosmos_address` derive addresses from keys. Malformed input raises
`AddressError` or `SignatureError`.

## What this package does not do

There is no command-line tool, no network node and no persistent storage:
state lives in a `MintKeeper` and a `Bank` for as long as the process runs.
Recording allocations for addresses on other chains and letting their owners
claim them is not part of this package.

## Running the tests

Install the `test` extra and run pytest from the project directory.