"""Domain models for bank accounts."""

from bank_account.models.enums import TransactionType
from bank_account.models.transaction import Transaction

__all__ = ["Transaction", "TransactionType"]
