"""Tests for pricebook.core.models enumerations."""

from pricebook.core.models import (
    AccountTransactionType,
    AssetClass,
    PortfolioTransactionType,
    TransactionCategory,
)


class TestEnums:
    def test_asset_class_values(self):
        assert {a.value for a in AssetClass} == {
            "cash",
            "debt",
            "equity",
            "real_estate",
            "commodity",
        }

    def test_str_enum_compares_to_value(self):
        assert AssetClass.EQUITY == "equity"
        assert str(AccountTransactionType.TRANSFER_IN) == "transfer_in"

    def test_account_kinds(self):
        assert len(AccountTransactionType) == 10

    def test_portfolio_kinds_subset_of_account_kinds(self):
        account_values = {t.value for t in AccountTransactionType}
        assert {t.value for t in PortfolioTransactionType} <= account_values

    def test_lookup_by_value(self):
        assert PortfolioTransactionType("sell") is PortfolioTransactionType.SELL
        assert TransactionCategory("income") is TransactionCategory.INCOME
