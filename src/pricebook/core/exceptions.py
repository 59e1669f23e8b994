"""Custom exception hierarchy for pricebook."""

from typing import Any


class PricebookError(Exception):
    """Base exception for all pricebook errors.

    All exceptions carry an optional `context` dict for structured error
    metadata that can be logged or serialized without parsing the message.
    """

    def __init__(self, message: str, context: dict[str, Any] | None = None):
        super().__init__(message)
        self.context = context or {}


class ConfigError(PricebookError):
    """Invalid or missing configuration.

    Raised by load_config() during startup. Should be treated as fatal.

    Context keys:
        field: str — the config field that failed validation
        value: Any — the invalid value
    """


class PriceDataError(PricebookError):
    """Price input could not be turned into price points.

    Policy: raise immediately. A partially loaded series would answer
    queries with silently wrong prices.

    Context keys:
        source: str — the file or adapter that produced the data
        row: int — 1-based data row number, if applicable
        column: str — the offending column
    """


class UnsupportedTransactionError(PricebookError):
    """A transaction kind outside the closed set a classifier handles.

    Policy: abort. This is a data model invariant violation and must
    never be skipped.

    Context keys:
        kind: str — "account" or "portfolio"
        transaction_type: str — repr of the unrecognized type
    """
