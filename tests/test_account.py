"""Tests for Account balance operations, interest and history."""

from decimal import Decimal

import pytest
from faker import Faker

from bank_account import Account, AccountLimits, BankConfig
from bank_account.exceptions import InvalidArgumentError, InvalidStateError
from bank_account.models import TransactionType
from bank_account.rates import BnrRateProvider, FixedRateProvider


class TestAccountCreation:
    """Tests for constructing accounts."""

    def test_default_balance_is_zero(self) -> None:
        assert Account().balance == 0

    def test_initial_balance(self) -> None:
        acc = Account(500000)
        assert acc.balance == Decimal("500000")

    def test_defaults(self) -> None:
        acc = Account()

        assert acc.min_balance == 1
        assert acc.daily_limit == 10000
        assert acc.interest_rate == Decimal("0.02")
        assert acc.daily_withdrawn == 0
        assert acc.history == ()
        assert acc.notifier is None
        assert isinstance(acc.rate_provider, BnrRateProvider)

    def test_generated_ids_are_unique(self) -> None:
        ids = {Account().account_id for _ in range(50)}
        assert len(ids) == 50

    def test_explicit_id(self, sample_account_id: str) -> None:
        acc = Account(10, account_id=sample_account_id)
        assert acc.account_id == sample_account_id
        assert sample_account_id in repr(acc)

    def test_custom_limits(self) -> None:
        limits = AccountLimits(min_balance=Decimal("100"), daily_limit=Decimal("500"))
        acc = Account(1000, limits=limits)

        assert acc.min_balance == 100
        assert acc.daily_limit == 500

    def test_from_config(self) -> None:
        config = BankConfig(limits=AccountLimits(daily_limit=Decimal("2000")))
        acc = Account.from_config(config, 300, account_id="cfg-001")

        assert acc.account_id == "cfg-001"
        assert acc.balance == 300
        assert acc.daily_limit == 2000
        assert acc.rate_provider.get_eur_to_ron_rate() == config.rates.reference_eur_to_ron

    def test_balance_is_read_only(self) -> None:
        acc = Account(10)
        with pytest.raises(AttributeError):
            acc.balance = Decimal("1000")  # type: ignore[misc]


class TestDeposit:
    """Tests for deposit."""

    def test_adds_to_balance(self) -> None:
        acc = Account(100)
        acc.deposit(Decimal("50.50"))
        assert acc.balance == Decimal("150.50")

    def test_records_transaction(self) -> None:
        acc = Account()
        acc.deposit(250)

        [tx] = acc.history
        assert tx.transaction_type == TransactionType.DEPOSIT
        assert tx.amount == 250
        assert tx.sequence == 1
        assert tx.account_id == acc.account_id

    def test_float_amounts_do_not_drift(self) -> None:
        acc = Account()
        acc.deposit(0.1)
        acc.deposit(0.2)
        assert acc.balance == Decimal("0.3")

    @pytest.mark.parametrize("amount", [0, -500])
    def test_non_positive_amounts_accepted(self, amount: int) -> None:
        acc = Account(1000)
        acc.deposit(amount)

        assert acc.balance == 1000 + amount
        assert len(acc.history) == 1

    def test_does_not_touch_daily_withdrawn(self) -> None:
        acc = Account()
        acc.deposit(20000)
        assert acc.daily_withdrawn == 0


class TestWithdraw:
    """Tests for withdraw and the daily limit."""

    def test_subtracts_from_balance(self) -> None:
        acc = Account(Decimal("150.50"))
        acc.withdraw(Decimal("20.50"))

        assert acc.balance == Decimal("130.00")
        assert acc.daily_withdrawn == Decimal("20.50")
        assert acc.history[-1].transaction_type == TransactionType.WITHDRAW

    def test_no_floor_check(self) -> None:
        acc = Account(100)
        acc.withdraw(300)
        assert acc.balance == -200

    def test_exactly_at_limit_allowed(self) -> None:
        acc = Account(50000)
        acc.withdraw(10000)

        assert acc.balance == 40000
        assert acc.daily_withdrawn == 10000

    def test_second_withdrawal_over_limit_rejected(self) -> None:
        acc = Account(50000)
        acc.withdraw(9000)

        with pytest.raises(InvalidStateError):
            acc.withdraw(1500)

        assert acc.balance == 41000
        assert acc.daily_withdrawn == 9000
        assert len(acc.history) == 1

    def test_single_withdrawal_over_limit_rejected(self) -> None:
        acc = Account(50000)

        with pytest.raises(InvalidStateError, match="Daily withdrawal limit"):
            acc.withdraw(Decimal("10000.01"))

        assert acc.balance == 50000
        assert acc.history == ()

    @pytest.mark.parametrize("amount", [0, -250])
    def test_non_positive_amounts_accepted(self, amount: int) -> None:
        acc = Account(1000)
        acc.withdraw(amount)

        assert acc.balance == 1000 - amount
        assert acc.daily_withdrawn == amount

    def test_start_new_day_resets_window(self) -> None:
        acc = Account(50000)
        acc.withdraw(9000)
        acc.start_new_day()
        acc.withdraw(9000)

        assert acc.daily_withdrawn == 9000
        assert acc.balance == 32000

    def test_start_new_day_keeps_balance_and_history(self) -> None:
        acc = Account(50000)
        acc.withdraw(100)
        acc.start_new_day()

        assert acc.balance == 49900
        assert len(acc.history) == 1

    def test_deposit_then_withdraw_is_identity(self, seed: int) -> None:
        fake = Faker()
        fake.seed_instance(seed)

        for _ in range(25):
            amount = fake.pydecimal(right_digits=2, positive=True, min_value=1, max_value=10000)
            acc = Account()
            acc.deposit(amount)
            acc.withdraw(amount)
            assert acc.balance == 0


class TestInterest:
    """Tests for interest calculation and application."""

    def test_calculate_full_year(self) -> None:
        acc = Account(10000)
        assert acc.calculate_interest(365) == Decimal("200")

    def test_calculate_partial_year(self) -> None:
        acc = Account(36500)
        assert acc.calculate_interest(30) == Decimal("60")

    def test_calculate_is_pure(self) -> None:
        acc = Account(10000)
        acc.calculate_interest(100)

        assert acc.balance == 10000
        assert acc.history == ()

    def test_custom_rate(self) -> None:
        acc = Account(1000, limits=AccountLimits(interest_rate=Decimal("0.10")))
        assert acc.calculate_interest(365) == Decimal("100")

    def test_rate_given_as_float(self) -> None:
        acc = Account(1000, limits=AccountLimits(interest_rate=0.03))

        assert acc.interest_rate == Decimal("0.03")
        assert acc.calculate_interest(365) == Decimal("30")

    def test_limits_given_as_floats(self) -> None:
        acc = Account(1000, limits=AccountLimits(min_balance=1.5, daily_limit=250.75))
        acc.withdraw(250.75)

        assert acc.balance == Decimal("749.25")
        with pytest.raises(InvalidStateError):
            acc.withdraw(0.01)

    def test_apply_interest(self) -> None:
        acc = Account(1000)
        acc.apply_interest(Decimal("12.34"))

        assert acc.balance == Decimal("1012.34")
        [tx] = acc.history
        assert tx.transaction_type == TransactionType.INTEREST
        assert tx.amount == Decimal("12.34")

    def test_apply_interest_ignores_daily_limit(self) -> None:
        acc = Account(0)
        acc.apply_interest(20000)
        assert acc.daily_withdrawn == 0

    def test_accrue_interest(self) -> None:
        acc = Account(10000)
        applied = acc.accrue_interest(365)

        assert applied == Decimal("200")
        assert acc.balance == Decimal("10200")
        assert acc.history[-1].transaction_type == TransactionType.INTEREST


class TestHistory:
    """Tests for history ordering and filtering."""

    def _busy_account(self) -> Account:
        acc = Account(10000, rate_provider=FixedRateProvider(5))
        acc.deposit(5000)
        acc.withdraw(2000)
        acc.apply_interest(10)
        acc.deposit(3000)
        return acc

    def test_chronological_sequence(self) -> None:
        acc = self._busy_account()

        assert [tx.sequence for tx in acc.history] == [1, 2, 3, 4]
        assert [tx.transaction_type for tx in acc.history] == [
            TransactionType.DEPOSIT,
            TransactionType.WITHDRAW,
            TransactionType.INTEREST,
            TransactionType.DEPOSIT,
        ]

    def test_history_is_snapshot(self) -> None:
        acc = self._busy_account()
        snapshot = acc.history
        acc.deposit(1)

        assert len(snapshot) == 4
        assert len(acc.history) == 5

    def test_get_transactions_by_type(self) -> None:
        acc = self._busy_account()
        deposits = acc.get_transactions_by_type(TransactionType.DEPOSIT)

        assert [tx.amount for tx in deposits] == [5000, 3000]
        assert [tx.sequence for tx in deposits] == [1, 4]

    def test_get_transactions_by_type_accepts_string(self) -> None:
        acc = self._busy_account()
        assert len(acc.get_transactions_by_type("WITHDRAW")) == 1

    def test_get_transactions_by_type_no_match(self) -> None:
        acc = self._busy_account()
        assert acc.get_transactions_by_type(TransactionType.TRANSFER_IN) == []

    def test_get_transactions_by_type_is_materialised(self) -> None:
        acc = self._busy_account()
        result = acc.get_transactions_by_type(TransactionType.DEPOSIT)
        result.clear()

        assert len(acc.get_transactions_by_type(TransactionType.DEPOSIT)) == 2
        assert len(acc.history) == 4

    def test_unknown_type_rejected(self) -> None:
        acc = self._busy_account()
        with pytest.raises(InvalidArgumentError, match="REFUND"):
            acc.get_transactions_by_type("REFUND")
