"""Helpers for reading invoke instructions off Dalvik bytecode.

Works against androguard method/instruction objects and against anything else
exposing the same ``get_code().get_bc().get_instructions()`` chain.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

_log = logging.getLogger(__name__)


@dataclass
class InvokeSite:
    offset: int
    opcode: str
    raw: str
    instruction: object


def parse_invoke_sig(raw: str) -> Optional[Tuple[str, str, str]]:
    """Split ``v0, v1, Lcom/foo/Bar;->baz(I)V`` into ``(owner, name, descriptor)``.

    Returns ``None`` when there is no ``->`` method reference.  The descriptor
    is empty when the reference carries no ``(``.
    """
    left, arrow, right = raw.rpartition("->")
    if not arrow:
        return None
    operands = left.replace(",", " ").split()
    owner = operands[-1] if operands else ""
    name, paren, rest = right.partition("(")
    return owner, name.strip(), (paren + rest).strip()


def is_invoke(ins) -> bool:
    try:
        return ins.get_name().startswith("invoke-")
    except AttributeError:
        return False


def _instructions(method) -> List[object]:
    if not hasattr(method, "get_code"):
        return []
    code = method.get_code()
    if not code:
        return []
    return list(code.get_bc().get_instructions())


def invoke_sites(method) -> Iterator[InvokeSite]:
    """Yield every invoke instruction of *method* with its code offset.

    Offsets are cumulative instruction lengths as reported by
    ``get_length()``; instructions without one count as a single unit.
    """
    offset = 0
    for ins in _instructions(method):
        if is_invoke(ins):
            try:
                raw = str(ins.get_output())
            except Exception:
                _log.debug("invoke_sites: unreadable instruction at %d", offset, exc_info=True)
                raw = None
            if raw is not None:
                yield InvokeSite(offset=offset, opcode=ins.get_name(), raw=raw, instruction=ins)
        length = getattr(ins, "get_length", None)
        offset += length() if callable(length) else 1
