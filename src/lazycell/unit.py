# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

from typing import ClassVar, Final, final


@final
class Unit:
    """Represents the value of a computation that produces nothing useful."""

    __slots__ = ()

    _instance: ClassVar[Unit | None] = None

    def __new__(cls) -> Unit:
        if cls._instance is None:
            cls._instance = super().__new__(cls)

        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "Unit()"

    def __reduce__(self) -> tuple[type[Unit], tuple[()]]:
        return (Unit, ())


UNIT: Final = Unit()
