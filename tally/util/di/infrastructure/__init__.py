"""Infrastructure providers."""

# Import bases
from .events import EventsProvider
from .persistence import PersistenceProvider

# Import implementations (needed for __subclasses__())
from .persistence import ProdPersistenceProvider  # noqa: F401

__all__ = [
    "EventsProvider",
    "PersistenceProvider",
    "ProdPersistenceProvider",
]
