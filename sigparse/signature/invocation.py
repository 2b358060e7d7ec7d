"""Bridge between call sites and :class:`SignatureParser`.

The parser never resolves symbols.  A call site hands its raw reference to a
resolver, and only the resolved descriptor string crosses into the parser.
"""
from __future__ import annotations

from typing import Callable, Protocol

from sigparse.bytecode.smali import parse_invoke_sig
from sigparse.errors import MalformedDescriptorError
from sigparse.signature.parser import SignatureParser

Resolver = Callable[[str], str]


class CallSite(Protocol):
    def get_signature(self, resolver) -> str:
        ...


class InvokeCallSite:
    """Adapt a Dalvik invoke instruction to the :class:`CallSite` protocol."""

    def __init__(self, instruction) -> None:
        self.instruction = instruction

    def __repr__(self) -> str:
        return f"InvokeCallSite({self.instruction.get_name()} {self.instruction.get_output()})"

    def get_signature(self, resolver: Resolver) -> str:
        return resolver(str(self.instruction.get_output()))


def invoke_output_resolver(raw: str) -> str:
    """Resolve ``v0, Lcom/foo/Bar;->baz(I)V`` to its descriptor ``(I)V``."""
    parsed = parse_invoke_sig(raw)
    if parsed is None or not parsed[2]:
        raise MalformedDescriptorError(f"No method descriptor in invoke output: {raw}")
    return parsed[2]


def get_num_parameters_for_invocation(call_site: CallSite, resolver) -> int:
    """Number of declared parameters passed at *call_site*.

    The receiver of an instance call is not a declared parameter and is not
    counted.
    """
    parser = SignatureParser(call_site.get_signature(resolver))
    return parser.get_num_parameters()
