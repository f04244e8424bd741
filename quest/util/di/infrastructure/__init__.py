"""Infrastructure DI providers."""

from quest.util.di.infrastructure.persistence import (
    PersistenceProvider,
    ProdPersistenceProvider,
)

__all__ = [
    "PersistenceProvider",
    "ProdPersistenceProvider",
]
