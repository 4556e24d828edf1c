# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

from logging import DEBUG, getLogger

from pytest import Session


def pytest_sessionstart(session: Session) -> None:
    # Make sure that the debug log statements are exercised by the tests.
    getLogger("lazycell").setLevel(DEBUG)
