"""Synthetic activity generators."""

from bank_account.generators.activity import (
    ActivityGenerator,
    Operation,
    OperationKind,
    ReplayStats,
    replay,
)
from bank_account.generators.base import BaseGenerator

__all__ = [
    "ActivityGenerator",
    "BaseGenerator",
    "Operation",
    "OperationKind",
    "ReplayStats",
    "replay",
]
