from __future__ import annotations

import logging
from typing import List

_log = logging.getLogger(__name__)


def _dalvik_class_name(raw: str) -> str:
    """Convert Dalvik class descriptor ``Lcom/foo/Bar;`` to ``com/foo/Bar``."""
    if raw.startswith("L") and raw.endswith(";"):
        return raw[1:-1]
    return raw


def _is_external(method_analysis) -> bool:
    """Return True when MethodAnalysis wraps an ExternalMethod (no bytecode)."""
    is_external = getattr(method_analysis, "is_external", None)
    if is_external is None:
        return False
    return bool(is_external())


def all_methods(dx) -> List[object]:
    """Return every concrete (non-external) method in the analysis."""
    out: List[object] = []
    for m in dx.get_methods():
        if _is_external(m):
            continue
        try:
            out.append(m.get_method())
        except AttributeError:
            _log.debug("all_methods: skipped %r without get_method", m)
            continue
    return out


def methods_for_class(dx, class_name: str, include_inner: bool = False) -> List[object]:
    """Return concrete methods belonging to *class_name*.

    *class_name* may use dot or slash separators, with or without the
    ``L...;`` wrapper.  When *include_inner* is True the match extends to
    inner/anonymous classes like ``com/foo/Bar$1``.
    """
    normalized = _dalvik_class_name(class_name).replace(".", "/")
    methods: List[object] = []
    for method in all_methods(dx):
        raw_cls = _dalvik_class_name(method.get_class_name())
        if raw_cls == normalized:
            methods.append(method)
        elif include_inner and raw_cls.startswith(normalized + "$"):
            methods.append(method)
    return methods


def method_name(method) -> str:
    try:
        return f"{method.get_class_name()}->{method.get_name()}{method.get_descriptor()}"
    except AttributeError:
        return "<unknown>"
