# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

import sys
import threading
import traceback
from collections.abc import Callable
from enum import Enum
from types import TracebackType
from typing import Any, Final, NamedTuple, NoReturn, TypeVar, cast, final

from typing_extensions import override

from lazycell import unchecked
from lazycell.error import InvalidOperationError, NoneValueError
from lazycell.logging import log
from lazycell.maybe import Maybe
from lazycell.outcome import Failure, Outcome, Success
from lazycell.unchecked import Supplier
from lazycell.unit import UNIT, Unit

T_co = TypeVar("T_co", covariant=True)

V = TypeVar("V")

_NONE_VALUE_MESSAGE: Final = (
    "A `Lazy` cannot hold a `None` value. Use `Lazy.of_nullable()` instead."
)


class LazyState(Enum):
    UNCOMPUTED = 0
    """The value has not been requested yet; the supplier is still held."""

    COMPUTED = 1
    """The supplier returned a value; the value is held."""

    FAILED = 2
    """The supplier raised an error; the error is held."""


class _Snapshot(NamedTuple):
    state: LazyState
    payload: object
    traceback: TracebackType | None = None
    context: BaseException | None = None
    cause: BaseException | None = None
    suppress_context: bool = False


@final
class Lazy(Supplier[T_co]):
    """
    Holds a value that is not computed until :meth:`materialize` is called.

    The supplier that produces the value runs at most once, even if several
    threads call :meth:`materialize` at the same time. Its outcome, a value or
    an error, is cached and handed to every later caller. An error is
    re-raised as the very same instance the supplier raised, never wrapped.

    Once the supplier has run, the cell no longer references it; whatever the
    supplier captured can be reclaimed as soon as nothing else refers to it.

    A :class:`Lazy` never holds ``None``. Use :meth:`of_nullable` for
    suppliers that might return ``None``.
    """

    _snapshot: _Snapshot
    _lock: threading.Lock
    _owner: int | None

    def __init__(self, supplier: Callable[[], T_co] | Supplier[T_co]) -> None:
        """
        :param supplier:
            The code that produces the value. It is expected to never return
            ``None``; if it does, :meth:`materialize` raises
            :class:`NoneValueError`.
        """
        self._init(_Snapshot(LazyState.UNCOMPUTED, unchecked.supplier(supplier)))

    def _init(self, snapshot: _Snapshot) -> None:
        # The state and its payload are always published together through a
        # single attribute store.
        self._snapshot = snapshot

        self._lock = threading.Lock()

        self._owner = None

    @staticmethod
    def _resolved(snapshot: _Snapshot) -> Lazy[Any]:
        cell: Lazy[Any] = object.__new__(Lazy)

        cell._init(snapshot)

        return cell

    @staticmethod
    def of(supplier: Callable[[], V] | Supplier[V]) -> Lazy[V]:
        return Lazy(supplier)

    @staticmethod
    def of_nullable(
        supplier: Callable[[], V | None] | Supplier[V | None],
    ) -> Lazy[Maybe[V]]:
        """
        Creates a :class:`Lazy` whose supplier might return ``None``. The value
        is wrapped in a :class:`Maybe`, which is empty if the supplier returned
        ``None``.
        """
        adapted = unchecked.supplier(supplier)

        def get_maybe() -> Maybe[V]:
            return Maybe.of_nullable(adapted.invoke())

        return Lazy(get_maybe)

    @staticmethod
    def of_value(value: V) -> Lazy[V]:
        """
        Creates a :class:`Lazy` that already holds ``value``.

        :raises NoneValueError: ``value`` is ``None``.
        """
        if value is None:
            raise NoneValueError(_NONE_VALUE_MESSAGE)

        return Lazy._resolved(_Snapshot(LazyState.COMPUTED, value))

    @staticmethod
    def of_nullable_value(value: V | None) -> Lazy[Maybe[V]]:
        return Lazy._resolved(_Snapshot(LazyState.COMPUTED, Maybe.of_nullable(value)))

    @staticmethod
    def failure(error: BaseException) -> Lazy[Any]:
        """Creates a :class:`Lazy` that raises ``error`` whenever it is materialized."""
        if not isinstance(error, BaseException):
            raise TypeError(
                f"`error` must be of type `{BaseException}`, but is of type `{type(error)}` instead."
            )

        return Lazy._resolved(_failed(error, error.__traceback__))

    @staticmethod
    def action(code: Callable[[], object] | unchecked.Runnable) -> Lazy[Unit]:
        """
        Creates a :class:`Lazy` that runs ``code`` once for its side effects.
        Its value is :data:`~lazycell.unit.UNIT`.
        """
        adapted = unchecked.runnable(code)

        def run_action() -> Unit:
            adapted.run()

            return UNIT

        return Lazy(run_action)

    def materialize(self) -> T_co:
        """
        Computes the value if that has not happened yet, then returns it.

        :raises NoneValueError: The supplier returned ``None``.
        :raises InvalidOperationError: The supplier tried to materialize its
            own cell.
        :raises BaseException: Whatever the supplier raised, unaltered.
        """
        snapshot = self._snapshot

        if snapshot.state is LazyState.UNCOMPUTED:
            snapshot = self._compute()

        if snapshot.state is LazyState.FAILED:
            self._raise(snapshot)

        return cast(T_co, snapshot.payload)

    def try_materialize(self) -> Outcome[T_co]:
        """
        Same as :meth:`materialize`, but returns the outcome instead of raising
        the cached error.
        """
        snapshot = self._snapshot

        if snapshot.state is LazyState.UNCOMPUTED:
            try:
                snapshot = self._compute()
            except InvalidOperationError as ex:
                return Failure(ex)

        if snapshot.state is LazyState.FAILED:
            return Failure(self._restore(snapshot))

        return Success(cast(T_co, snapshot.payload))

    @override
    def invoke(self) -> T_co:
        return self.materialize()

    @override
    def try_invoke(self) -> Outcome[T_co]:
        return self.try_materialize()

    def _compute(self) -> _Snapshot:
        if self._owner == threading.get_ident():
            raise InvalidOperationError(
                "The `Lazy` is already being materialized by the current thread. A supplier cannot materialize its own `Lazy`."
            )

        # The error, if any, that the calling thread is handling right now.
        handled = sys.exception()

        with self._lock:
            # Another thread might have completed the computation while we were
            # waiting for the lock.
            snapshot = self._snapshot
            if snapshot.state is not LazyState.UNCOMPUTED:
                return snapshot

            supplier = cast(Supplier[T_co], snapshot.payload)

            self._owner = threading.get_ident()

            try:
                snapshot = self._run(supplier)
            finally:
                self._owner = None

            del supplier

            if snapshot.state is LazyState.FAILED:
                error = cast(BaseException, snapshot.payload)

                snapshot = self._seal(error, handled)

                log.debug("The supplier of a `Lazy` value raised an error.", exc=error)

                del error

            # Overwrites the only reference the cell had to the supplier.
            self._snapshot = snapshot

        return snapshot

    @staticmethod
    def _run(supplier: Supplier[Any]) -> _Snapshot:
        log.debug("Materializing a `Lazy` value on thread {}.", threading.get_ident())

        try:
            value = supplier.invoke()
        except BaseException as ex:
            return _Snapshot(LazyState.FAILED, ex, ex.__traceback__)

        if value is None:
            return _Snapshot(LazyState.FAILED, NoneValueError(_NONE_VALUE_MESSAGE))

        log.debug("Materialized a `Lazy` value of type `{}`.", type(value))

        return _Snapshot(LazyState.COMPUTED, value)

    @staticmethod
    def _seal(error: BaseException, handled: BaseException | None) -> _Snapshot:
        """
        Detaches ``error``, and the errors chained to it, from the frames that
        raised them.

        A finished frame still references its function, so a traceback through
        the supplier keeps the supplier, and everything it captured, alive.
        Each traceback is therefore replaced with a note that lists its stack.
        """
        pending = [error]

        visited: set[int] = set()

        while pending:
            ex = pending.pop()

            if id(ex) in visited or (ex is handled and ex is not error):
                continue

            visited.add(id(ex))

            # The error the caller happened to be handling is not part of the
            # failure; later callers must not see it.
            if handled is not None and ex.__context__ is handled:
                ex.__context__ = None

            tb = ex.__traceback__
            if tb is not None:
                ex.add_note(_format_stack(tb))

                traceback.clear_frames(tb)

                ex.__traceback__ = None

                del tb

            for chained in (ex.__cause__, ex.__context__):
                if chained is not None:
                    pending.append(chained)

        return _failed(error, None)

    @staticmethod
    def _restore(snapshot: _Snapshot) -> BaseException:
        error = cast(BaseException, snapshot.payload)

        # A previous caller that materialized from within an `except` block has
        # chained its own error to the cached one.
        error.__context__ = snapshot.context
        error.__cause__ = snapshot.cause

        # Must come after `__cause__`, whose setter turns it on.
        error.__suppress_context__ = snapshot.suppress_context

        return error

    @staticmethod
    def _raise(snapshot: _Snapshot) -> NoReturn:
        error = Lazy._restore(snapshot)

        try:
            # Starting over from the cached traceback, which is empty for errors
            # raised by a supplier, keeps it from growing on every replay.
            raise error.with_traceback(snapshot.traceback)
        finally:
            del error, snapshot

    @property
    def state(self) -> LazyState:
        return self._snapshot.state

    def is_materialized(self) -> bool:
        return self._snapshot.state is not LazyState.UNCOMPUTED

    def __repr__(self) -> str:
        state, payload = self._snapshot.state, self._snapshot.payload

        if state is LazyState.COMPUTED:
            return f"Lazy({payload!r})"

        if state is LazyState.FAILED:
            return f"Lazy(failure={payload!r})"

        return "Lazy(<uncomputed>)"


def _failed(error: BaseException, tb: TracebackType | None) -> _Snapshot:
    return _Snapshot(
        LazyState.FAILED,
        error,
        tb,
        error.__context__,
        error.__cause__,
        error.__suppress_context__,
    )


def _format_stack(tb: TracebackType) -> str:
    lines = traceback.format_list(traceback.extract_tb(tb))

    return "Raised by the supplier of a `Lazy` value (most recent call last):\n" + "".join(lines).rstrip("\n")  # fmt: skip
