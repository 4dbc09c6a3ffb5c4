"""Resource disposal helpers.

A :class:`DisposableStore` collects cleanup callbacks and releases them together.
Releasing twice is harmless, and anything added after release is disposed of on
the spot instead of being kept.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Protocol, TypeVar, runtime_checkable


logger = logging.getLogger(__name__)


@runtime_checkable
class Disposable(Protocol):
    def dispose(self) -> None: ...


D = TypeVar("D", bound=Disposable)


def is_disposable(obj: Any) -> bool:
    """Return True when ``obj`` has a callable ``dispose`` attribute."""

    return callable(getattr(obj, "dispose", None))


class _CallbackDisposable:
    def __init__(self, fn: Callable[[], None]) -> None:
        self._fn = fn
        self._disposed = False

    def dispose(self) -> None:
        if self._disposed:
            return
        self._disposed = True
        self._fn()


def to_disposable(fn: Callable[[], None]) -> Disposable:
    """Wrap ``fn`` so it runs on the first ``dispose()`` call only."""

    return _CallbackDisposable(fn)


class DisposableStore:
    """A container that disposes everything it holds when it is disposed.

    Can be used as a context manager; leaving the block disposes the store.

    Example:
        >>> store = DisposableStore()
        >>> handle = store.add(to_disposable(lambda: print("released")))
        >>> store.dispose()
        released
    """

    def __init__(self) -> None:
        self._disposables: Dict[int, Disposable] = {}
        self._disposed = False

    @property
    def is_disposed(self) -> bool:
        return self._disposed

    def __len__(self) -> int:
        return len(self._disposables)

    def __enter__(self) -> "DisposableStore":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.dispose()

    def add(self, *disposables: D) -> D | List[D]:
        """Track one or more disposables.

        Returns the disposable itself when a single one is passed, otherwise the
        list of all of them. After the store has been disposed, added items are
        disposed immediately rather than tracked.
        """

        for disposable in disposables:
            if self._disposed:
                logger.debug("Store already disposed; releasing %r immediately", disposable)
                disposable.dispose()
            else:
                self._disposables.setdefault(id(disposable), disposable)
        if len(disposables) == 1:
            return disposables[0]
        return list(disposables)

    def dispose(self) -> None:
        """Release everything and refuse to hold new items. Idempotent."""

        if self._disposed:
            return
        self._disposed = True
        self.clear()

    def clear(self) -> None:
        """Release everything currently held but keep the store usable.

        Items are tracked by identity. Every held item is disposed even when an
        earlier one raises; the first error is re-raised afterwards.
        """

        held = list(self._disposables.values())
        self._disposables.clear()
        logger.debug("Disposing %d tracked resources", len(held))
        first_error: Exception | None = None
        for disposable in held:
            try:
                disposable.dispose()
            except Exception as exc:
                logger.debug("Disposing %r failed: %s", disposable, exc)
                if first_error is None:
                    first_error = exc
        if first_error is not None:
            raise first_error
