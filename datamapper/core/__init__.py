from .errors import (  # noqa
    ConflictingStateError,
    DataMapperConfigError,
    DataMapperError,
    MissingIdentityError,
    UnitOfWorkInvariantError,
)
from .models import (  # noqa
    AbstractPersistenceExecutor,
    Category,
    Entity,
)
