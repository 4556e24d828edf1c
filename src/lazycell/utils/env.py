# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import final, overload

from typing_extensions import override

from lazycell.error import EnvironmentVariableError


class Environment(ABC):
    @abstractmethod
    def get(self, name: str) -> str: ...

    @overload
    def maybe_get(self, name: str) -> str | None: ...

    @overload
    def maybe_get(self, name: str, default: str) -> str: ...

    @abstractmethod
    def maybe_get(self, name: str, default: str | None = None) -> str | None: ...

    @abstractmethod
    def has(self, name: str) -> bool: ...


@final
class StandardEnvironment(Environment):
    @override
    def get(self, name: str) -> str:
        return os.environ[name]

    @overload
    def maybe_get(self, name: str) -> str | None: ...

    @overload
    def maybe_get(self, name: str, default: str) -> str: ...

    @override
    def maybe_get(self, name: str, default: str | None = None) -> str | None:
        return os.environ.get(name, default)

    @override
    def has(self, name: str) -> bool:
        return name in os.environ


@final
class InProcEnvironment(Environment):
    """Serves variables from a fixed mapping instead of the process environment."""

    def __init__(self, variables: Mapping[str, str] | None = None) -> None:
        self._variables = dict(variables or {})

    @override
    def get(self, name: str) -> str:
        return self._variables[name]

    @overload
    def maybe_get(self, name: str) -> str | None: ...

    @overload
    def maybe_get(self, name: str, default: str) -> str: ...

    @override
    def maybe_get(self, name: str, default: str | None = None) -> str | None:
        return self._variables.get(name, default)

    @override
    def has(self, name: str) -> bool:
        return name in self._variables


_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})

_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


def maybe_get_bool(env: Environment, var_name: str) -> bool | None:
    """
    :raises EnvironmentVariableError:
    """
    s = env.maybe_get(var_name)
    if s is None:
        return None

    value = s.strip().lower()

    if value in _TRUE_VALUES:
        return True

    if value in _FALSE_VALUES:
        return False

    raise EnvironmentVariableError(
        var_name, f"`{var_name}` must be a boolean value, but is '{s}' instead."
    )
