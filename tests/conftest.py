from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from sigparse.config import RunConfig, RunContext
from sigparse.log import Logger
from tests.helpers.fakes import FakeAnalysis


@pytest.fixture
def make_ctx():
    def _make_ctx(methods=None, output_format="text", verbose=False, class_filter=None, limit=0):
        config = RunConfig(
            output_format=output_format,
            verbose=verbose,
            class_filter=class_filter,
            limit=limit,
        )
        return RunContext(
            config=config,
            logger=Logger(verbose=verbose),
            analysis=FakeAnalysis(methods or []),
        )

    return _make_ctx
