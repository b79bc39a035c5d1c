class DataMapperError(Exception):
    """``DataMapper`` 와 관련된 모든 에러의 기본 클래스."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    ...


class MissingIdentityError(DataMapperError):
    """엔티티에 ID가 없어 등록할 수 없는 경우의 에러."""

    ...


class ConflictingStateError(DataMapperError):
    """엔티티가 이미 호환되지 않는 상태로 등록되어 있는 경우의 에러."""

    def __init__(self, message: str, entity_id: str = "", category: str = ""):
        super().__init__(message)
        self.entity_id = entity_id
        self.category = category


class DataMapperConfigError(DataMapperError):
    """설정 로딩 실패 에러."""

    ...


class UnitOfWorkInvariantError(RuntimeError):
    """UoW 내부 불변식 위반.

    호출자의 입력이 아니라 구현 결함으로만 발생하므로 :class:`DataMapperError`
    를 상속하지 않습니다. 잡아서 재시도하지 말 것.
    """
