"""UnitOfWork 패턴 모듈.

하나의 비즈니스 트랜잭션 동안 생성(new), 변경(dirty), 삭제(deleted)될 엔티티를
추적합니다. 실제 저장소 반영은 외부 executor 가 :meth:`UnitOfWork.pending` 을
읽어서 수행합니다.

주의:

    UoW 는 스레드 간에 공유하지 않습니다. 트랜잭션(혹은 스레드)마다 새로 만들어
    사용해야 합니다.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Iterator, Mapping, Optional, Union

from datamapper.config import DataMapperConfig
from datamapper.core import (
    Category,
    ConflictingStateError,
    Entity,
    MissingIdentityError,
    UnitOfWorkInvariantError,
)
from datamapper.logging import get_logger
from datamapper.utils import format_category

EntityMap = dict[str, Entity]
EntityOrId = Union[Entity, str]


class UnitOfWork:
    """엔티티 ID를 키로 new/dirty/deleted 세 레지스트리를 관리하는 UoW 입니다.

    하나의 ID는 항상 세 레지스트리 중 최대 한 곳에만 존재합니다. 모든 등록
    메소드는 검증을 먼저 끝낸 후에 레지스트리를 변경하므로, 실패한 호출은
    아무 상태도 바꾸지 않습니다.
    """

    def __init__(self, config: Optional[DataMapperConfig] = None) -> None:
        self.config = config or DataMapperConfig()
        self.logger = get_logger(self.config.logger_name, self.config.level)
        self._new_objects: EntityMap = {}
        self._dirty_objects: EntityMap = {}
        self._deleted_objects: EntityMap = {}

    def __repr__(self) -> str:
        return (
            f"UnitOfWork[new={len(self._new_objects)}, "
            f"dirty={len(self._dirty_objects)}, "
            f"deleted={len(self._deleted_objects)}]"
        )

    def __len__(self) -> int:
        return (
            len(self._new_objects)
            + len(self._dirty_objects)
            + len(self._deleted_objects)
        )

    def __bool__(self) -> bool:
        return len(self) > 0

    def __contains__(self, entity: EntityOrId) -> bool:
        return self.is_registered(entity)

    # 읽기 전용 뷰

    @property
    def new_objects(self) -> Mapping[str, Entity]:
        """INSERT 될 엔티티들."""
        return MappingProxyType(self._new_objects)

    @property
    def dirty_objects(self) -> Mapping[str, Entity]:
        """UPDATE 될 엔티티들."""
        return MappingProxyType(self._dirty_objects)

    @property
    def deleted_objects(self) -> Mapping[str, Entity]:
        """DELETE 될 엔티티들."""
        return MappingProxyType(self._deleted_objects)

    def registry(self, category: Union[Category, str]) -> Mapping[str, Entity]:
        """주어진 카테고리의 읽기 전용 레지스트리를 리턴합니다."""
        return MappingProxyType(self._registry_for(category))

    def state_of(self, entity: EntityOrId) -> Optional[Category]:
        """엔티티(혹은 ID)가 등록된 카테고리를 찾습니다. 없으면 ``None``."""
        entity_id = entity if isinstance(entity, str) else getattr(entity, "id", None)
        if not entity_id:
            return None
        for category in Category:
            if entity_id in self._registry_for(category):
                return category
        return None

    def is_registered(self, entity: EntityOrId) -> bool:
        return self.state_of(entity) is not None

    def pending(self) -> Iterator[tuple[Category, Entity]]:
        """``(카테고리, 엔티티)`` 쌍을 insert → update → delete 순서로 리턴합니다.

        같은 카테고리 안에서는 등록 순서를 유지합니다. 순서는 기본값일 뿐이고
        실행 순서는 executor 가 결정합니다.
        """
        for category in Category:
            for entity in list(self._registry_for(category).values()):
                yield category, entity

    def summary(self) -> str:
        """로그나 디버깅용 컬러 텍스트 요약."""
        lines = ["<UnitOfWork>"]
        for category in Category:
            lines += format_category(category, self._registry_for(category))
        return "\n".join(lines)

    def clear(self) -> None:
        """executor 가 작업을 반영한 후 UoW 를 재사용할 수 있도록 비웁니다."""
        self.logger.debug("clearing %r", self)
        self._new_objects.clear()
        self._dirty_objects.clear()
        self._deleted_objects.clear()

    # 검증

    def _registry_for(self, category: Union[Category, str]) -> EntityMap:
        try:
            category = Category(category)
        except ValueError:
            raise UnitOfWorkInvariantError(
                f'unknown registry for state of persistence: "{category}"'
            ) from None

        if category is Category.NEW:
            return self._new_objects
        elif category is Category.DIRTY:
            return self._dirty_objects
        return self._deleted_objects

    def assert_has_identity(self, entity: Entity) -> str:
        """엔티티의 ID를 리턴합니다. ID가 비어 있으면 :class:`MissingIdentityError`."""
        entity_id = entity.id
        if not entity_id:
            self.logger.warning("entity has no ID: %r", entity)
            raise MissingIdentityError(
                f"Registering entity failed: entity has no ID: {entity!r}"
            )
        return entity_id

    def assert_not_registered_as(
        self, entity: Entity, category: Union[Category, str]
    ) -> None:
        """엔티티가 이미 ``category`` 로 등록되어 있으면 :class:`ConflictingStateError`.

        알 수 없는 카테고리는 내부 결함이므로 :class:`UnitOfWorkInvariantError`
        가 발생합니다.
        """
        registry = self._registry_for(category)
        category = Category(category)

        if entity.id in registry:
            self.logger.warning(
                "entity %r is already registered as %s", entity.id, category
            )
            raise ConflictingStateError(
                "Registering entity failed: "
                f'entity with ID "{entity.id}" is already registered as {category}',
                entity_id=entity.id,
                category=category.value,
            )

    # 등록

    def register_new(self, entity: Entity) -> None:
        """엔티티를 새로 생성될 엔티티로 등록합니다."""
        entity_id = self.assert_has_identity(entity)

        # 변경이나 삭제는 이미 저장된 엔티티를 전제로 하므로 new 가 될 수 없습니다.
        self.assert_not_registered_as(entity, Category.DIRTY)
        self.assert_not_registered_as(entity, Category.DELETED)
        self.assert_not_registered_as(entity, Category.NEW)

        self._new_objects[entity_id] = entity
        self.logger.debug("registered new: %r", entity_id)

    def register_dirty(self, entity: Entity) -> None:
        """엔티티를 변경된 엔티티로 등록합니다.

        아직 저장되지 않은(new) 엔티티라면 아무 것도 하지 않습니다. 이미 dirty
        인 경우 저장된 레퍼런스만 갱신합니다.
        """
        entity_id = self.assert_has_identity(entity)
        self.assert_not_registered_as(entity, Category.DELETED)

        if entity_id in self._new_objects:
            self.logger.debug("%r is still new, ignoring dirty registration", entity_id)
            return

        self._dirty_objects[entity_id] = entity
        self.logger.debug("registered dirty: %r", entity_id)

    def register_deleted(self, entity: Entity) -> None:
        """엔티티를 삭제될 엔티티로 등록합니다.

        아직 저장되지 않은(new) 엔티티는 지울 것이 없으므로 new 에서 제거만
        하고 deleted 에는 추가하지 않습니다.
        """
        entity_id = self.assert_has_identity(entity)

        if entity_id in self._new_objects:
            del self._new_objects[entity_id]
            self.logger.debug("cancelled new: %r", entity_id)
            return

        # 삭제될 엔티티의 변경 사항은 의미가 없습니다.
        self._dirty_objects.pop(entity_id, None)
        self._deleted_objects.setdefault(entity_id, entity)
        self.logger.debug("registered deleted: %r", entity_id)
