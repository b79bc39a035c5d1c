"""executor 가 사용하는 UoW 읽기 인터페이스 테스트."""
from __future__ import annotations

import pytest

from datamapper.core import Category, UnitOfWorkInvariantError
from datamapper.test.unit import FakeEntity
from datamapper.uow import UnitOfWork


@pytest.fixture
def filled_uow(uow: UnitOfWork) -> UnitOfWork:
    uow.register_deleted(FakeEntity("d1"))
    uow.register_dirty(FakeEntity("u1"))
    uow.register_new(FakeEntity("n1"))
    uow.register_dirty(FakeEntity("u2"))
    uow.register_new(FakeEntity("n2"))
    return uow


def test_views_are_read_only(filled_uow: UnitOfWork):
    for view in (
        filled_uow.new_objects,
        filled_uow.dirty_objects,
        filled_uow.deleted_objects,
        filled_uow.registry(Category.NEW),
    ):
        with pytest.raises(TypeError):
            view["x"] = FakeEntity("x")  # type: ignore

    assert "x" not in filled_uow


def test_views_follow_later_registrations(uow: UnitOfWork):
    view = uow.new_objects

    uow.register_new(FakeEntity("5"))

    assert list(view) == ["5"]


def test_registry_by_name(filled_uow: UnitOfWork):
    assert list(filled_uow.registry("dirty")) == ["u1", "u2"]

    with pytest.raises(UnitOfWorkInvariantError):
        filled_uow.registry("removed")


def test_state_of(filled_uow: UnitOfWork):
    assert filled_uow.state_of("n1") is Category.NEW
    assert filled_uow.state_of(FakeEntity("u2")) is Category.DIRTY
    assert filled_uow.state_of("d1") is Category.DELETED
    assert filled_uow.state_of("unknown") is None

    assert "n2" in filled_uow
    assert FakeEntity("d1") in filled_uow
    assert "unknown" not in filled_uow


@pytest.mark.parametrize("value", [5, object(), None, FakeEntity("")])
def test_unrelated_values_are_not_contained(filled_uow: UnitOfWork, value):
    assert value not in filled_uow
    assert filled_uow.state_of(value) is None


def test_len_and_repr(filled_uow: UnitOfWork):
    assert len(filled_uow) == 5
    assert filled_uow
    assert repr(filled_uow) == "UnitOfWork[new=2, dirty=2, deleted=1]"


def test_pending_yields_inserts_then_updates_then_deletes(filled_uow: UnitOfWork):
    got = [(category, entity.id) for category, entity in filled_uow.pending()]

    assert got == [
        (Category.NEW, "n1"),
        (Category.NEW, "n2"),
        (Category.DIRTY, "u1"),
        (Category.DIRTY, "u2"),
        (Category.DELETED, "d1"),
    ]


def test_clear(filled_uow: UnitOfWork):
    filled_uow.clear()

    assert len(filled_uow) == 0
    assert list(filled_uow.pending()) == []

    # 비운 후에도 다시 사용할 수 있습니다.
    filled_uow.register_new(FakeEntity("d1"))
    assert filled_uow.state_of("d1") is Category.NEW


def test_summary_lists_every_category(filled_uow: UnitOfWork):
    summary = filled_uow.summary()

    assert summary.startswith("<UnitOfWork>")
    for text in ("<new>", "<dirty>", "<deleted>", "'n1'", "'u2'", "'d1'"):
        assert text in summary
    assert summary.index("<new>") < summary.index("<dirty>") < summary.index("<deleted>")
