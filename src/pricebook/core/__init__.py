"""pricebook.core — Foundation types, config, and exceptions."""

from pricebook.core.config import (
    CsvConfig,
    DisplayConfig,
    LoggingConfig,
    PricebookConfig,
    load_config,
)
from pricebook.core.exceptions import (
    ConfigError,
    PriceDataError,
    PricebookError,
    UnsupportedTransactionError,
)
from pricebook.core.models import (
    AccountTransactionType,
    AssetClass,
    FeedName,
    Isin,
    PortfolioTransactionType,
    SecurityName,
    TickerSymbol,
    TransactionCategory,
)

__all__ = [
    # Type aliases
    "SecurityName",
    "Isin",
    "TickerSymbol",
    "FeedName",
    # Enums
    "AssetClass",
    "AccountTransactionType",
    "PortfolioTransactionType",
    "TransactionCategory",
    # Config
    "PricebookConfig",
    "CsvConfig",
    "DisplayConfig",
    "LoggingConfig",
    "load_config",
    # Exceptions
    "PricebookError",
    "ConfigError",
    "PriceDataError",
    "UnsupportedTransactionError",
]
