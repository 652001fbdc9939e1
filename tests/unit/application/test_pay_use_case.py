"""
Name: Pay Use Case Tests

Responsibilities:
  - Amount validation happens first, for any id
  - Only ACTIVE users can pay (unset status is rejected, unlike Deposit)
  - Insufficient funds leave the balance untouched
"""

import logging
from dataclasses import replace
from decimal import Decimal

import pytest

from user_accounts.application.usecases.users import (
    PayUseCase,
    UserAccountErrorCode,
)
from user_accounts.crosscutting.exceptions import ConcurrentUpdateError
from user_accounts.domain.entities import UserStatus

pytestmark = pytest.mark.unit


@pytest.mark.parametrize("amount", [Decimal("-1"), Decimal("0"), None])
def test_non_positive_amount_is_invalid_argument(mock_user_repository, amount):
    result = PayUseCase(repository=mock_user_repository).execute(1, amount)

    assert result.error.code == UserAccountErrorCode.INVALID_ARGUMENT
    assert result.error.message == "Payment amount must be greater than zero."
    mock_user_repository.find_by_id.assert_not_called()


def test_unknown_user_is_not_found(user_repository):
    result = PayUseCase(repository=user_repository).execute(3, Decimal("1"))

    assert result.error.code == UserAccountErrorCode.NOT_FOUND
    assert result.error.operation == "pay"


@pytest.mark.parametrize("status", [None, UserStatus.INACTIVE])
def test_not_active_user_is_invalid_state(user_repository, stored_user, status):
    user = stored_user(status=status, balance=Decimal("100"))

    result = PayUseCase(repository=user_repository).execute(user.id, Decimal("1"))

    assert result.error.code == UserAccountErrorCode.INVALID_STATE
    assert user_repository.find_by_id(user.id).balance == Decimal("100")


def test_insufficient_balance_is_invalid_argument(user_repository, stored_user):
    user = stored_user(status=UserStatus.ACTIVE, balance=Decimal("60"))

    result = PayUseCase(repository=user_repository).execute(user.id, Decimal("1000"))

    assert result.error.code == UserAccountErrorCode.INVALID_ARGUMENT
    assert result.error.message == "Insufficient balance for payment."
    assert user_repository.find_by_id(user.id).balance == Decimal("60")


def test_missing_balance_counts_as_zero(user_repository, stored_user):
    user = stored_user(status=UserStatus.ACTIVE, balance=None)

    result = PayUseCase(repository=user_repository).execute(user.id, Decimal("0.01"))

    assert result.error.code == UserAccountErrorCode.INVALID_ARGUMENT


def test_payment_subtracts(user_repository, stored_user):
    user = stored_user(status=UserStatus.ACTIVE, balance=Decimal("100"))

    result = PayUseCase(repository=user_repository).execute(user.id, Decimal("40"))

    assert result.error is None
    assert result.balance == Decimal("60")
    assert user_repository.find_by_id(user.id).balance == Decimal("60")


def test_paying_whole_balance_leaves_zero(user_repository, stored_user):
    user = stored_user(status=UserStatus.ACTIVE, balance=Decimal("25.50"))

    result = PayUseCase(repository=user_repository).execute(user.id, Decimal("25.50"))

    assert result.error is None
    assert result.balance == Decimal("0")


def test_payment_logs(user_repository, stored_user, caplog):
    user = stored_user(status=UserStatus.ACTIVE, balance=Decimal("10"))

    with caplog.at_level(logging.INFO, logger="user_accounts"):
        PayUseCase(repository=user_repository).execute(user.id, Decimal("4"))

    record = next(r for r in caplog.records if r.getMessage().startswith("Payment"))
    assert record.user_id == user.id
    assert record.balance == Decimal("6")


def test_lost_race_is_conflict(mock_user_repository, user_factory):
    mock_user_repository.find_by_id.return_value = user_factory.create(
        user_id=1, status=UserStatus.ACTIVE, balance=Decimal("10")
    )
    mock_user_repository.save.side_effect = ConcurrentUpdateError(1, 0)

    result = PayUseCase(repository=mock_user_repository).execute(1, Decimal("1"))

    assert result.error.code == UserAccountErrorCode.CONFLICT


@pytest.mark.parametrize(
    "amount", [Decimal("NaN"), Decimal("sNaN"), Decimal("Infinity")]
)
def test_non_finite_amount_is_invalid_argument(mock_user_repository, amount):
    result = PayUseCase(repository=mock_user_repository).execute(1, amount)

    assert result.balance is None
    assert result.error.code == UserAccountErrorCode.INVALID_ARGUMENT
    mock_user_repository.find_by_id.assert_not_called()
    mock_user_repository.save.assert_not_called()


def test_reports_balance_of_stored_record(mock_user_repository, user_factory):
    mock_user_repository.find_by_id.return_value = user_factory.create(
        user_id=1, status=UserStatus.ACTIVE, balance=Decimal("10")
    )
    mock_user_repository.save.side_effect = lambda user: replace(
        user, balance=Decimal("9.99")
    )

    result = PayUseCase(repository=mock_user_repository).execute(1, Decimal("0.004"))

    assert result.error is None
    assert result.balance == Decimal("9.99")
