"""Shared Instance Registry - memoizes immutable values by a derived key.

Equal keys always resolve to the same stored instance. Entries are never
evicted; a key moves from absent to present once and stays there for the
lifetime of the registry.
"""

import threading
from dataclasses import dataclass
from typing import Callable, Dict, Generic, Hashable, List, Optional, TypeVar

from flyweight_registry.infrastructure.logging.logger import get_logger

A = TypeVar("A")
V = TypeVar("V")


@dataclass(frozen=True)
class RegistryStats:
    """Point-in-time counters of a registry."""
    size: int
    created: int
    reused: int

    @property
    def requests(self) -> int:
        return self.created + self.reused

    @property
    def hit_ratio(self) -> float:
        if not self.requests:
            return 0.0
        return self.reused / self.requests


class SharedInstanceRegistry(Generic[A, V]):
    """
    Registry handing out shared instances keyed by intrinsic attributes.

    The check-then-insert sequence of ``acquire`` runs under a single lock,
    so concurrent callers asking for the same key observe exactly one
    constructed value. The lock is reentrant, which lets a value factory
    acquire other values from the same registry.

    Registries are plain objects: create one and pass it to whatever needs
    shared values.
    """

    def __init__(self,
                 key_factory: Callable[[A], Hashable],
                 value_factory: Callable[[A], V],
                 name: Optional[str] = None):
        """
        Initialize shared instance registry.

        Args:
            key_factory: Pure function deriving the sharing key from attributes
            value_factory: Function constructing a new value from attributes
            name: Optional name used in log records
        """
        self._key_factory = key_factory
        self._value_factory = value_factory
        self.name = name or self.__class__.__name__
        self._instances: Dict[Hashable, V] = {}
        self._lock = threading.RLock()
        self._created = 0
        self._reused = 0
        self.logger = get_logger(__name__)

    def acquire(self, attributes: A) -> V:
        """
        Return the shared value for the given attributes.

        The stored value is returned when the derived key is already present.
        Otherwise a new value is constructed, stored and returned. If the
        value factory raises, the exception propagates and the key stays
        absent.

        Args:
            attributes: Intrinsic attributes identifying the value

        Returns:
            Shared value instance

        Raises:
            TypeError: If the derived key is unhashable
        """
        key = self._key_factory(attributes)
        with self._lock:
            if key in self._instances:
                self._reused += 1
                return self._instances[key]

            value = self._value_factory(attributes)
            self._instances[key] = value
            self._created += 1

        self.logger.debug(
            "Created shared instance", registry=self.name, key=str(key)
        )
        return value

    def contains(self, attributes: A) -> bool:
        """Check whether a value for the given attributes is already stored."""
        key = self._key_factory(attributes)
        with self._lock:
            return key in self._instances

    def size(self) -> int:
        """Number of stored entries."""
        with self._lock:
            return len(self._instances)

    def keys(self) -> List[Hashable]:
        """Snapshot of the stored keys, in no particular order."""
        with self._lock:
            return list(self._instances.keys())

    def stats(self) -> RegistryStats:
        """Snapshot of the registry counters."""
        with self._lock:
            return RegistryStats(
                size=len(self._instances),
                created=self._created,
                reused=self._reused,
            )

    def __contains__(self, attributes: object) -> bool:
        return self.contains(attributes)  # type: ignore[arg-type]

    def __len__(self) -> int:
        return self.size()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name='{self.name}', size={self.size()})"
