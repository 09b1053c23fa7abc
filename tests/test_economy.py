import pytest

from denarius.economy import Economy


@pytest.fixture
def economy():
    return Economy(1000, 100, 50)


def test_update_monthly_applies_balance_and_resets(economy):
    economy.update_monthly()
    assert economy.denars == pytest.approx(1050)
    assert (economy.income, economy.expenses) == (0.0, 0.0)


def test_add_income_and_expense_accumulate():
    fresh = Economy(0)
    for amount in (10, 5):
        fresh.add_income(amount)
    fresh.add_expense(3)
    assert fresh.income == pytest.approx(15)
    assert fresh.expenses == pytest.approx(3)
    assert fresh.denars == 0


def test_take_loan_goes_to_treasury(economy):
    economy.take_loan(50)
    assert economy.denars == pytest.approx(1050)
    assert economy.income == 100


def test_balanced_month_leaves_treasury_unchanged():
    balanced = Economy(500)
    balanced.add_income(20)
    balanced.add_expense(20)
    balanced.update_monthly()
    assert balanced.denars == pytest.approx(500)


def test_second_settlement_without_activity_changes_nothing(economy):
    economy.update_monthly()
    settled = economy.denars
    economy.update_monthly()
    assert economy.denars == settled