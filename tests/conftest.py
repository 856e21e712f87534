from datetime import datetime, timedelta, timezone

import pytest

from models import Product
from notifications import Notifier
from storage import SessionStorage


class Clock:
    def __init__(self):
        self.now = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += timedelta(seconds=seconds)


@pytest.fixture
def clock():
    return Clock()


@pytest.fixture
def notifier(clock):
    return Notifier(clock=clock)


@pytest.fixture
def storage():
    return SessionStorage({})


def make_product(pid="p1", name="Test Bag", price=65, **kw):
    return Product(id=pid, name=name, price=price, description=kw.pop("description", "A bag"), **kw)


@pytest.fixture
def product_factory():
    return make_product
