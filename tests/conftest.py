import pytest

from sqlavro.adapters.generic import GenericTypeMapping
from sqlavro.adapters.static_source import StaticColumnSource
from sqlavro.canonical.column import ColumnDescriptor
from sqlavro.execution.options import GeneratorOptions
from sqlavro.standards import sql_types as T


ORDERS_COLUMNS = [
    ColumnDescriptor(name="order_id", sql_type=T.INTEGER),
    ColumnDescriptor(name="Amount", sql_type=T.DECIMAL, precision=10, scale=2),
    ColumnDescriptor(name="created-at", sql_type=T.TIMESTAMP),
]


@pytest.fixture
def options():
    return GeneratorOptions()


@pytest.fixture
def mapping():
    return GenericTypeMapping()


@pytest.fixture
def orders_source():
    return StaticColumnSource({"ORDERS": ORDERS_COLUMNS})
