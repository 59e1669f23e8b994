"""pricebook.securities — Security records and ledger classification."""

from pricebook.securities.ledger import (
    Account,
    AccountTransaction,
    Client,
    Portfolio,
    PortfolioTransaction,
    classify_account_transaction,
    classify_portfolio_transaction,
    security_transactions,
)
from pricebook.securities.security import Security, compare_by_name, sort_by_name

__all__ = [
    # Security
    "Security",
    "compare_by_name",
    "sort_by_name",
    # Ledger
    "Account",
    "AccountTransaction",
    "Client",
    "Portfolio",
    "PortfolioTransaction",
    "classify_account_transaction",
    "classify_portfolio_transaction",
    "security_transactions",
]
