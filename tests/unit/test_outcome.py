# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

import pytest

from lazycell import Failure, Maybe, Success, outcome_of


class TestOutcome:
    def test_success_works(self) -> None:
        outcome = Success("foo")

        assert outcome.is_success()

        assert not outcome.is_failure()

        assert outcome.get() == "foo"

        assert outcome.maybe_value() == Maybe.of("foo")

        assert outcome.maybe_error().is_empty()

    def test_failure_works(self) -> None:
        error = ValueError("foo")

        outcome = Failure(error)

        assert outcome.is_failure()

        assert not outcome.is_success()

        assert outcome.maybe_value().is_empty()

        assert outcome.maybe_error().get() is error

        with pytest.raises(ValueError) as exc_info:
            outcome.get()

        assert exc_info.value is error

    def test_outcome_of_works(self) -> None:
        error = KeyError("foo")

        def fail() -> int:
            raise error

        assert outcome_of(lambda: 2) == Success(2)

        assert outcome_of(fail) == Failure(error)

    def test_outcome_is_immutable(self) -> None:
        outcome = Success(1)

        with pytest.raises(AttributeError):
            outcome.value = 2  # type: ignore[misc]
