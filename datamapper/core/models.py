from __future__ import annotations

from enum import Enum
from typing import Optional, Protocol


class Entity(Protocol):
    """Entity 프로토콜 명세.

    UoW는 엔티티의 다른 필드는 건드리지 않고 ``id`` 만 키로 사용합니다.
    """

    @property
    def id(self) -> Optional[str]:  # 비어 있으면 ID가 없는 것으로 간주합니다.
        ...


class Category(str, Enum):
    """UoW가 추적하는 영속성 상태."""

    NEW = "new"
    """아직 저장되지 않아 INSERT 될 엔티티."""
    DIRTY = "dirty"
    """이미 저장된 후 변경되어 UPDATE 될 엔티티."""
    DELETED = "deleted"
    """저장소에서 DELETE 될 엔티티."""

    def __str__(self) -> str:
        return self.value


class AbstractPersistenceExecutor(Protocol):
    """UoW에 쌓인 작업을 실제 저장소에 반영하는 외부 협력자.

    이 패키지는 실제 구현을 제공하지 않습니다. 실행 순서는 executor 책임이며
    :meth:`UnitOfWork.pending` 이 기본 순서(insert → update → delete)를 제공합니다.
    """

    def insert(self, entity: Entity) -> None:
        ...

    def update(self, entity: Entity) -> None:
        ...

    def delete(self, entity: Entity) -> None:
        ...
