from .config import DataMapperConfig  # noqa
from .core import (  # noqa
    AbstractPersistenceExecutor,
    Category,
    ConflictingStateError,
    DataMapperConfigError,
    DataMapperError,
    Entity,
    MissingIdentityError,
    UnitOfWorkInvariantError,
)
from .uow import UnitOfWork  # noqa
