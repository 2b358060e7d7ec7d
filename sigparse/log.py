from __future__ import annotations

import logging
import sys

_LOGGER_NAME = "sigparse"
_FORMAT = "[%(levelname)s] %(message)s"


class Logger:
    """Thin wrapper over the ``sigparse`` stdlib logger.

    ``verbose`` switches the threshold from INFO to DEBUG.  Constructing a new
    ``Logger`` replaces the handler installed by a previous one, so output is
    never duplicated.
    """

    def __init__(self, verbose: bool = False, stream=None) -> None:
        self.verbose = verbose
        self._logger = logging.getLogger(_LOGGER_NAME)
        self._logger.setLevel(logging.DEBUG if verbose else logging.INFO)
        self._logger.propagate = False
        for handler in list(self._logger.handlers):
            if getattr(handler, "_sigparse", False):
                self._logger.removeHandler(handler)
        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT))
        handler._sigparse = True
        self._logger.addHandler(handler)

    def debug(self, msg: str) -> None:
        self._logger.debug(msg)

    def info(self, msg: str) -> None:
        self._logger.info(msg)

    def warning(self, msg: str) -> None:
        self._logger.warning(msg)

    def error(self, msg: str) -> None:
        self._logger.error(msg)
