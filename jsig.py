#!/usr/bin/env python3
"""jsig - JVM/Dalvik method-descriptor inspector.

Thin entry point.  All logic lives in :mod:`sigparse.cli`.
"""
from __future__ import annotations

import sys

import androguard.util

from sigparse.cli import main, parse_args  # noqa: F401 - re-exported for tests


def run() -> int:
    androguard.util.set_log("CRITICAL")
    return main(sys.argv[1:])


if __name__ == "__main__":
    raise SystemExit(run())
