# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

import logging
from logging import Formatter, Logger, StreamHandler, getLogger
from typing import Any, Final, final

from lazycell.error import EnvironmentVariableError
from lazycell.utils.env import Environment, StandardEnvironment, maybe_get_bool


@final
class LogWriter:
    """Writes log messages using ``format()`` strings."""

    _NO_HIGHLIGHT: Final = {"highlighter": None}

    def __init__(self, logger: Logger) -> None:
        self._logger = logger

    def debug(
        self, message: str, *args: Any, exc: BaseException | None = None, **kwargs: Any
    ) -> None:
        self._log(logging.DEBUG, message, args, kwargs, exc or False)

    def _log(
        self,
        level: int,
        message: str,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
        exc_info: bool | BaseException = False,
    ) -> None:
        if not self._logger.isEnabledFor(level):
            return

        if args or kwargs:
            message = message.format(*args, **kwargs)

        self._logger.log(level, message, exc_info=exc_info, extra=self._NO_HIGHLIGHT)


def get_log_writer(name: str | None = None) -> LogWriter:
    """Returns the :class:`LogWriter` for the specified name."""
    return LogWriter(getLogger(name))


log = get_log_writer("lazycell")


def configure_logging(
    no_rich: bool | None = None, env: Environment | None = None
) -> None:
    """
    Replaces the handlers of the root logger with a single console handler.

    :param no_rich:
        If ``True``, uses a plain :class:`logging.StreamHandler` instead of
        rich. If ``None``, reads ``LAZYCELL_NO_RICH`` from the environment.
    :param env:
        The environment to read settings from. Defaults to the process
        environment.

    :raises EnvironmentVariableError:
    """
    if env is None:
        env = StandardEnvironment()

    if no_rich is None:
        no_rich = maybe_get_bool(env, "LAZYCELL_NO_RICH") or False

    level = _get_log_level(env)

    logger = getLogger()

    for old_handler in logger.handlers[:]:
        logger.removeHandler(old_handler)

        old_handler.close()

    datefmt = "%Y-%m-%d %H:%M:%S"

    handler: logging.Handler

    if no_rich:
        handler = StreamHandler()

        console_formatter = Formatter(
            "%(asctime)s %(levelname)s: %(name)s - %(message)s", datefmt
        )
    else:
        from rich.logging import RichHandler

        from lazycell.utils.rich import get_error_console

        console = get_error_console()

        handler = RichHandler(console=console, show_path=False, keywords=[])

        console_formatter = Formatter("%(name)s - %(message)s", datefmt)

    handler.setFormatter(console_formatter)

    logger.addHandler(handler)

    logger.setLevel(level)


def _get_log_level(env: Environment) -> int:
    var_name = "LAZYCELL_LOG_LEVEL"

    s = env.maybe_get(var_name)
    if s is None:
        return logging.INFO

    level = logging.getLevelName(s.strip().upper())
    if not isinstance(level, int):
        raise EnvironmentVariableError(
            var_name, f"`{var_name}` must be a valid log level name, but is '{s}' instead."  # fmt: skip
        )

    return level
