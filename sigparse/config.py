from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from sigparse.log import Logger


@dataclass
class RunConfig:
    output_format: str
    verbose: bool
    class_filter: Optional[str] = None
    limit: int = 0


@dataclass
class RunContext:
    config: RunConfig
    logger: Logger
    analysis: object = None
    metrics: dict = field(default_factory=dict)
