from datetime import date

import pytest

from expense_core.services import ExpenseStore
from expense_core.storage import MemoryStorage

TODAY = date(2024, 5, 14)


@pytest.fixture
def memory_storage():
    return MemoryStorage()


@pytest.fixture
def store(memory_storage):
    return ExpenseStore(memory_storage, today=lambda: TODAY)
