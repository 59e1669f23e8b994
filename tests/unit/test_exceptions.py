"""Tests for pricebook.core.exceptions."""

import pytest

from pricebook.core.exceptions import (
    ConfigError,
    PriceDataError,
    PricebookError,
    UnsupportedTransactionError,
)


class TestExceptionHierarchy:
    """Verify the exception class hierarchy."""

    def test_config_is_subclass(self):
        assert issubclass(ConfigError, PricebookError)

    def test_price_data_is_subclass(self):
        assert issubclass(PriceDataError, PricebookError)

    def test_unsupported_transaction_is_subclass(self):
        assert issubclass(UnsupportedTransactionError, PricebookError)

    def test_base_is_exception(self):
        assert issubclass(PricebookError, Exception)


class TestExceptionContext:
    """Verify context dict behavior."""

    def test_default_context_empty(self):
        e = PricebookError("boom")
        assert e.context == {}
        assert str(e) == "boom"

    def test_context_preserved(self):
        e = PriceDataError("bad row", context={"source": "a.csv", "row": 3})
        assert e.context["row"] == 3

    def test_catch_via_base(self):
        with pytest.raises(PricebookError):
            raise UnsupportedTransactionError("unknown", context={"kind": "account"})
