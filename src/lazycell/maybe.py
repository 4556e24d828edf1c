# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar, final

from lazycell.error import NoneValueError

T = TypeVar("T")

U = TypeVar("U")


@final
@dataclass(frozen=True)
class Maybe(Generic[T]):
    """
    Holds a value that might be absent.

    Unlike a bare ``None``, an empty :class:`Maybe` is itself a value, which lets
    :class:`~lazycell.lazy.Lazy` tell "computed, but empty" apart from "not
    computed yet".
    """

    _value: T | None = None

    @staticmethod
    def of(value: T) -> Maybe[T]:
        """
        :raises NoneValueError: ``value`` is ``None``.
        """
        if value is None:
            raise NoneValueError(
                "`value` must not be `None`. Use `Maybe.of_nullable()` instead."
            )

        return Maybe(value)

    @staticmethod
    def of_nullable(value: T | None) -> Maybe[T]:
        return Maybe(value)

    @staticmethod
    def empty() -> Maybe[T]:
        return _EMPTY  # type: ignore[return-value]

    def is_present(self) -> bool:
        return self._value is not None

    def is_empty(self) -> bool:
        return self._value is None

    def get(self) -> T:
        """
        :raises LookupError: The instance is empty.
        """
        if self._value is None:
            raise LookupError("`Maybe` is empty.")

        return self._value

    def or_else(self, default: T) -> T:
        if self._value is None:
            return default

        return self._value

    def map(self, fn: Callable[[T], U | None]) -> Maybe[U]:
        if self._value is None:
            return Maybe.empty()

        return Maybe(fn(self._value))

    def __bool__(self) -> bool:
        return self._value is not None

    def __repr__(self) -> str:
        if self._value is None:
            return "Maybe.empty()"

        return f"Maybe.of({self._value!r})"


_EMPTY: Maybe[object] = Maybe()
