# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, NoReturn, TypeAlias, TypeVar, Union, final

from lazycell.maybe import Maybe

T = TypeVar("T")

T_co = TypeVar("T_co", covariant=True)


@final
@dataclass(frozen=True)
class Success(Generic[T_co]):
    """Holds the value produced by a computation that completed normally."""

    value: T_co

    def is_success(self) -> bool:
        return True

    def is_failure(self) -> bool:
        return False

    def get(self) -> T_co:
        return self.value

    def maybe_value(self) -> Maybe[T_co]:
        return Maybe.of_nullable(self.value)

    def maybe_error(self) -> Maybe[BaseException]:
        return Maybe.empty()


@final
@dataclass(frozen=True)
class Failure:
    """Holds the error raised by a computation, exactly as it was raised."""

    error: BaseException

    def is_success(self) -> bool:
        return False

    def is_failure(self) -> bool:
        return True

    def get(self) -> NoReturn:
        raise self.error

    def maybe_value(self) -> Maybe[NoReturn]:
        return Maybe.empty()

    def maybe_error(self) -> Maybe[BaseException]:
        return Maybe.of(self.error)


Outcome: TypeAlias = Union[Success[T], Failure]


def outcome_of(fn: Callable[[], T]) -> Outcome[T]:
    """Calls ``fn`` and returns its result, or the error it raised, as an :data:`Outcome`."""
    try:
        return Success(fn())
    except BaseException as ex:
        return Failure(ex)
