"""Ledger records and the per-security transaction view.

A client owns cash accounts and securities accounts (portfolios). Both
book transactions that may reference a security. For one security, the
relevant history is its income (interest and dividends booked on cash
accounts) plus every change to the position (booked on portfolios).
Everything else on the cash side merely moves money and is left out.

Classification is a closed mapping from transaction type to category.
A type outside that mapping means the ledger holds data this code does
not understand, which is raised as ``UnsupportedTransactionError``
instead of being skipped.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import TYPE_CHECKING

from pricebook.core.exceptions import UnsupportedTransactionError
from pricebook.core.models import (
    AccountTransactionType,
    PortfolioTransactionType,
    TransactionCategory,
)

if TYPE_CHECKING:
    from pricebook.securities.security import Security

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AccountTransaction:
    """A cash account booking, optionally tied to a security."""

    date: date
    type: AccountTransactionType
    amount: Decimal
    security: Security | None = None


@dataclass(frozen=True)
class PortfolioTransaction:
    """A securities account booking; always tied to a security."""

    date: date
    type: PortfolioTransactionType
    security: Security
    shares: Decimal
    amount: Decimal


@dataclass
class Account:
    name: str
    transactions: list[AccountTransaction] = field(default_factory=list)


@dataclass
class Portfolio:
    name: str
    transactions: list[PortfolioTransaction] = field(default_factory=list)


@dataclass
class Client:
    """Top-level container: the securities and all accounts of one owner."""

    securities: list[Security] = field(default_factory=list)
    accounts: list[Account] = field(default_factory=list)
    portfolios: list[Portfolio] = field(default_factory=list)


def classify_account_transaction(tx_type: AccountTransactionType) -> TransactionCategory:
    match tx_type:
        case AccountTransactionType.INTEREST | AccountTransactionType.DIVIDENDS:
            return TransactionCategory.INCOME
        case (
            AccountTransactionType.FEES
            | AccountTransactionType.TAXES
            | AccountTransactionType.DEPOSIT
            | AccountTransactionType.REMOVAL
            | AccountTransactionType.BUY
            | AccountTransactionType.SELL
            | AccountTransactionType.TRANSFER_IN
            | AccountTransactionType.TRANSFER_OUT
        ):
            return TransactionCategory.CASH
        case _:
            raise UnsupportedTransactionError(
                f"Unsupported account transaction type: {tx_type!r}",
                context={"kind": "account", "transaction_type": repr(tx_type)},
            )


def classify_portfolio_transaction(tx_type: PortfolioTransactionType) -> TransactionCategory:
    match tx_type:
        case (
            PortfolioTransactionType.BUY
            | PortfolioTransactionType.SELL
            | PortfolioTransactionType.TRANSFER_IN
            | PortfolioTransactionType.TRANSFER_OUT
        ):
            return TransactionCategory.POSITION
        case _:
            raise UnsupportedTransactionError(
                f"Unsupported portfolio transaction type: {tx_type!r}",
                context={"kind": "portfolio", "transaction_type": repr(tx_type)},
            )


def security_transactions(
    security: Security, client: Client
) -> list[AccountTransaction | PortfolioTransaction]:
    """Collect the income and position transactions of ``security``.

    Account transactions come first (in account order), then portfolio
    transactions (in portfolio order); no re-sorting by date happens here.
    Securities are matched by identity.

    Raises
    ------
    UnsupportedTransactionError
        If a matching transaction carries a type outside the known set.
    """
    answer: list[AccountTransaction | PortfolioTransaction] = []

    for account in client.accounts:
        for t in account.transactions:
            if t.security is None or t.security is not security:
                continue
            if classify_account_transaction(t.type) is TransactionCategory.INCOME:
                answer.append(t)

    for portfolio in client.portfolios:
        for t in portfolio.transactions:
            if t.security is not security:
                continue
            if classify_portfolio_transaction(t.type) is TransactionCategory.POSITION:
                answer.append(t)

    logger.debug("Collected %d transaction(s) for %s", len(answer), security)
    return answer
