"""Shared type aliases and enumerations used across pricebook."""

from __future__ import annotations

from enum import StrEnum

# --- Type Aliases ---

SecurityName = str
Isin = str
TickerSymbol = str
FeedName = str

# --- Enumerations ---


class AssetClass(StrEnum):
    """Broad asset classes a security can belong to."""

    CASH = "cash"
    DEBT = "debt"
    EQUITY = "equity"
    REAL_ESTATE = "real_estate"
    COMMODITY = "commodity"


class AccountTransactionType(StrEnum):
    """Kinds of cash account bookings."""

    DEPOSIT = "deposit"
    REMOVAL = "removal"
    INTEREST = "interest"
    DIVIDENDS = "dividends"
    FEES = "fees"
    TAXES = "taxes"
    BUY = "buy"
    SELL = "sell"
    TRANSFER_IN = "transfer_in"
    TRANSFER_OUT = "transfer_out"


class PortfolioTransactionType(StrEnum):
    """Kinds of securities account (portfolio) bookings."""

    BUY = "buy"
    SELL = "sell"
    TRANSFER_IN = "transfer_in"
    TRANSFER_OUT = "transfer_out"


class TransactionCategory(StrEnum):
    """How a transaction relates to the security it references.

    INCOME transactions pay out of a holding (interest, dividends).
    POSITION transactions change the size of a holding.
    CASH transactions only move money and are not part of a security's
    own transaction history.
    """

    INCOME = "income"
    POSITION = "position"
    CASH = "cash"
