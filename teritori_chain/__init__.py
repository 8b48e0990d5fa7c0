"""Token minting, reward distribution and team vesting for a Cosmos-style chain."""

__version__ = "0.1.0"