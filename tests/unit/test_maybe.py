# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

import pytest

from lazycell import Maybe, NoneValueError


class TestMaybe:
    def test_of_works(self) -> None:
        maybe = Maybe.of("foo")

        assert maybe.is_present()

        assert not maybe.is_empty()

        assert maybe

        assert maybe.get() == "foo"

        assert maybe.or_else("bar") == "foo"

    def test_of_raises_error_when_value_is_none(self) -> None:
        with pytest.raises(
            NoneValueError, match=r"^`value` must not be `None`\. Use `Maybe\.of_nullable\(\)` instead\.$"  # fmt: skip
        ):
            Maybe.of(None)

    def test_empty_works(self) -> None:
        maybe: Maybe[str] = Maybe.empty()

        assert maybe.is_empty()

        assert not maybe

        assert maybe.or_else("bar") == "bar"

        assert maybe == Maybe.of_nullable(None)

        with pytest.raises(LookupError, match=r"^`Maybe` is empty\.$"):
            maybe.get()

    def test_map_works(self) -> None:
        assert Maybe.of("foo").map(str.upper) == Maybe.of("FOO")

        assert Maybe.of("foo").map(lambda _: None).is_empty()

        assert Maybe.empty().map(str.upper).is_empty()

    def test_falsy_value_is_present(self) -> None:
        maybe = Maybe.of(0)

        assert maybe.is_present()

        assert maybe.get() == 0

    def test_repr_works(self) -> None:
        assert repr(Maybe.of(1)) == "Maybe.of(1)"

        assert repr(Maybe.empty()) == "Maybe.empty()"
