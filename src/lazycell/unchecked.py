# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""
Adapters that let a callable fail with any error at all.

Every adapter in this module calls the wrapped code and lets whatever it
raises reach the caller untouched: the very same exception instance, never a
copy and never chained to an adapter-specific envelope. The ``try_*``
variants capture the raised error in an :data:`~lazycell.outcome.Outcome`
instead.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Generic, TypeVar, final

from typing_extensions import override

from lazycell.outcome import Outcome, outcome_of
from lazycell.unit import UNIT, Unit

T = TypeVar("T")

T_co = TypeVar("T_co", covariant=True)

IN = TypeVar("IN")

OUT = TypeVar("OUT")


class Supplier(ABC, Generic[T_co]):
    """Produces a value, or raises whatever error its code raises."""

    @abstractmethod
    def invoke(self) -> T_co:
        """Produces the value; any error is propagated as raised."""

    def try_invoke(self) -> Outcome[T_co]:
        return outcome_of(self.invoke)

    def __call__(self) -> T_co:
        return self.invoke()


class Runnable(ABC):
    """Runs code for its side effects, or raises whatever error it raises."""

    @abstractmethod
    def run(self) -> None: ...

    def try_run(self) -> Outcome[Unit]:
        def run_unit() -> Unit:
            self.run()

            return UNIT

        return outcome_of(run_unit)

    def __call__(self) -> None:
        self.run()


class Function(ABC, Generic[IN, OUT]):
    """Maps an input to an output, or raises whatever error its code raises."""

    @abstractmethod
    def apply(self, value: IN) -> OUT: ...

    def try_apply(self, value: IN) -> Outcome[OUT]:
        return outcome_of(lambda: self.apply(value))

    def __call__(self, value: IN) -> OUT:
        return self.apply(value)


@final
class _CallableSupplier(Supplier[T]):
    def __init__(self, fn: Callable[[], T]) -> None:
        self._fn = fn

    @override
    def invoke(self) -> T:
        return self._fn()


@final
class _CallableRunnable(Runnable):
    def __init__(self, fn: Callable[[], object]) -> None:
        self._fn = fn

    @override
    def run(self) -> None:
        self._fn()


@final
class _CallableFunction(Function[IN, OUT]):
    def __init__(self, fn: Callable[[IN], OUT]) -> None:
        self._fn = fn

    @override
    def apply(self, value: IN) -> OUT:
        return self._fn(value)


def supplier(fn: Callable[[], T] | Supplier[T]) -> Supplier[T]:
    """
    Adapts ``fn`` to :class:`Supplier`. An object that already is a
    :class:`Supplier` is returned as is.
    """
    if isinstance(fn, Supplier):
        return fn

    if not callable(fn):
        raise TypeError(f"`fn` must be callable, but is of type `{type(fn)}` instead.")

    return _CallableSupplier(fn)


def runnable(fn: Callable[[], object] | Runnable) -> Runnable:
    """
    Adapts ``fn`` to :class:`Runnable`. Any value returned by ``fn`` is
    discarded.
    """
    if isinstance(fn, Runnable):
        return fn

    if not callable(fn):
        raise TypeError(f"`fn` must be callable, but is of type `{type(fn)}` instead.")

    return _CallableRunnable(fn)


def function(fn: Callable[[IN], OUT] | Function[IN, OUT]) -> Function[IN, OUT]:
    if isinstance(fn, Function):
        return fn

    if not callable(fn):
        raise TypeError(f"`fn` must be callable, but is of type `{type(fn)}` instead.")

    return _CallableFunction(fn)


def get(fn: Callable[[], T] | Supplier[T]) -> T:
    return supplier(fn).invoke()


def run(fn: Callable[[], object] | Runnable) -> None:
    runnable(fn).run()


def apply(value: IN, fn: Callable[[IN], OUT] | Function[IN, OUT]) -> OUT:
    return function(fn).apply(value)
