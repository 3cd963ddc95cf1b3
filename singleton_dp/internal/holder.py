import logging
import threading
from typing import Callable, Generic, TypeVar

LOG = logging.getLogger(__name__)

T = TypeVar("T")

_MISSING = object()


class LazyHolder(Generic[T]):
    """
    Owns at most one instance produced by ``factory``.

    The instance is built on the first ``get_instance()`` call and returned
    as-is afterwards. Concurrent first callers are serialised on a lock, so
    ``factory`` runs exactly once. If ``factory`` raises, nothing is stored
    and the next call tries again.
    """

    def __init__(self, factory: Callable[[], T], name: str | None = None) -> None:
        if not callable(factory):
            raise TypeError(f"factory must be callable, got {type(factory).__name__}")
        self._factory = factory
        self._name = name or getattr(factory, "__qualname__", repr(factory))
        self._instance: object = _MISSING
        self._lock = threading.Lock()

    @property
    def name(self) -> str:
        return self._name

    @property
    def initialized(self) -> bool:
        return self._instance is not _MISSING

    def get_instance(self) -> T:
        # fast path: a published reference is always fully constructed
        instance = self._instance
        if instance is not _MISSING:
            LOG.debug("The Singleton instance already exists! (%s)", self._name)
            return instance  # type: ignore[return-value]

        with self._lock:
            instance = self._instance
            if instance is _MISSING:
                LOG.info("Creating the Singleton instance... (%s)", self._name)
                instance = self._factory()
                self._instance = instance
            else:
                LOG.debug("The Singleton instance already exists! (%s)", self._name)
            return instance  # type: ignore[return-value]

    def __repr__(self) -> str:
        state = "initialized" if self.initialized else "uninitialized"
        return f"<{type(self).__name__} {self._name} {state}>"
