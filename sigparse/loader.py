from __future__ import annotations

import logging
from pathlib import Path

from androguard.misc import AnalyzeAPK, AnalyzeDex

from sigparse.errors import LoaderError

_log = logging.getLogger(__name__)


def load_target(path: str):
    """Analyse an ``.apk`` or ``.dex`` file and return the androguard Analysis."""
    target = Path(path)
    if not target.is_file():
        raise LoaderError(f"No such file: {path}")
    suffix = target.suffix.lower()
    _log.debug("loading %s", target)
    if suffix == ".apk":
        _apk, _dex, dx = AnalyzeAPK(str(target))
    elif suffix == ".dex":
        _digest, _dex, dx = AnalyzeDex(str(target))
    else:
        raise LoaderError(f"Unsupported input type {suffix or '<none>'}: expected .apk or .dex")
    return dx
