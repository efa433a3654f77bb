"""
Account-related models for Mercado Bitcoin client.

Immutable data structures for balances and withdrawal limits.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Balance:
    """Available/total pair for one asset."""
    available: float
    total: float


@dataclass(frozen=True)
class Balances:
    """Balances for every asset held by the account."""
    bch: Balance
    brl: Balance
    btc: Balance
    eth: Balance
    ltc: Balance
    xrp: Balance
    mbprk01: Balance
    mbprk02: Balance
    mbprk03: Balance
    mbprk04: Balance
    mbcons01: Balance
    usdc: Balance


@dataclass(frozen=True)
class WithdrawalLimits:
    """Withdrawal limits per asset."""
    bch: Balance
    brl: Balance
    btc: Balance
    eth: Balance
    ltc: Balance
    xrp: Balance


@dataclass(frozen=True)
class AccountInfo:
    """Account information data structure."""
    balance: Balances
    withdrawal_limits: WithdrawalLimits
