# pylint: disable=redefined-outer-name, protected-access
"""pytest 에서 사용될 전역 Fixture들을 정의합니다."""
from __future__ import annotations

from typing import Callable

import pytest

from datamapper.config import DataMapperConfig
from datamapper.test.unit import FakePersistenceExecutor
from datamapper.uow import UnitOfWork
from tests import random_sku
from tests.app.domain.models import Product

# types

ProductMaker = Callable[..., Product]
""":func:`make_product` 픽스처 타입."""


@pytest.fixture
def uow() -> UnitOfWork:
    """비어 있는 새 :class:`.UnitOfWork` 픽스처를 리턴합니다."""
    return UnitOfWork(DataMapperConfig(log_level="DEBUG"))


@pytest.fixture
def executor() -> FakePersistenceExecutor:
    return FakePersistenceExecutor()


@pytest.fixture
def make_product() -> ProductMaker:
    """임의의 SKU 를 가진 :class:`Product` 를 만드는 팩토리 픽스처."""

    def wrapper(name: str = "", **kwargs) -> Product:
        return Product(random_sku(name), **kwargs)

    return wrapper
