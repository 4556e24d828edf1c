# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

import copy
import pickle

from lazycell import UNIT, Unit


def test_unit_is_singleton() -> None:
    assert Unit() is UNIT

    assert copy.copy(UNIT) is UNIT
    assert copy.deepcopy(UNIT) is UNIT

    assert pickle.loads(pickle.dumps(UNIT)) is UNIT


def test_unit_is_not_none() -> None:
    assert UNIT is not None

    assert not UNIT

    assert repr(UNIT) == "Unit()"

    assert UNIT == Unit()

    assert hash(UNIT) == hash(Unit())
