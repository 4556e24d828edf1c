# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

from lazycell.error import EnvironmentVariableError as EnvironmentVariableError
from lazycell.error import InvalidOperationError as InvalidOperationError
from lazycell.error import NoneValueError as NoneValueError
from lazycell.lazy import Lazy as Lazy
from lazycell.lazy import LazyState as LazyState
from lazycell.logging import configure_logging as configure_logging
from lazycell.maybe import Maybe as Maybe
from lazycell.outcome import Failure as Failure
from lazycell.outcome import Outcome as Outcome
from lazycell.outcome import Success as Success
from lazycell.outcome import outcome_of as outcome_of
from lazycell.unchecked import Function as Function
from lazycell.unchecked import Runnable as Runnable
from lazycell.unchecked import Supplier as Supplier
from lazycell.unit import UNIT as UNIT
from lazycell.unit import Unit as Unit

__version__ = "0.1.0"
