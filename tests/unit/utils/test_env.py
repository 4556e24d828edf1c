# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

import pytest

from lazycell import EnvironmentVariableError
from lazycell.utils.env import InProcEnvironment, StandardEnvironment, maybe_get_bool


class TestMaybeGetBool:
    @pytest.mark.parametrize(
        "s,expected",
        [
            ("1", True),
            ("true", True),
            (" Yes ", True),
            ("ON", True),
            ("0", False),
            ("False", False),
            ("no", False),
            ("off", False),
        ],
    )
    def test_maybe_get_bool_works(self, s: str, expected: bool) -> None:
        env = InProcEnvironment({"FOO": s})

        assert maybe_get_bool(env, "FOO") is expected

    def test_maybe_get_bool_returns_none_when_not_set(self) -> None:
        assert maybe_get_bool(InProcEnvironment(), "FOO") is None

    def test_maybe_get_bool_raises_error_when_value_is_invalid(self) -> None:
        env = InProcEnvironment({"FOO": "maybe"})

        with pytest.raises(
            EnvironmentVariableError, match=r"^`FOO` must be a boolean value, but is 'maybe' instead\.$"  # fmt: skip
        ) as exc_info:
            maybe_get_bool(env, "FOO")

        assert exc_info.value.var_name == "FOO"


class TestStandardEnvironment:
    def test_get_works(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LAZYCELL_TEST_VAR", "foo")

        env = StandardEnvironment()

        assert env.get("LAZYCELL_TEST_VAR") == "foo"

        assert env.has("LAZYCELL_TEST_VAR")

        assert maybe_get_bool(env, "LAZYCELL_TEST_VAR_UNSET") is None

        assert env.maybe_get("LAZYCELL_TEST_VAR_UNSET", "bar") == "bar"
