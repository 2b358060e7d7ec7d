"""Forward-only tokenizer over the parameter section of a method descriptor.

A descriptor such as ``(ILjava/lang/String;[D)V`` is self-delimiting: every
type token is either a single primitive code, an ``L...;`` reference, or one
of those prefixed with ``[`` for each array dimension.
"""
from __future__ import annotations

from typing import Iterator

from sigparse.errors import MalformedDescriptorError

PRIMITIVE_CODES = frozenset("BCDFIJSZ")


class ParameterSignatureIterator:
    """Cursor over the parameter type tokens of one descriptor.

    Each instance is a single traversal: it cannot be rewound, and the parser
    hands out a fresh one per request.  Malformed input is reported lazily,
    when the offending token is reached.
    """

    def __init__(self, signature: str) -> None:
        self._signature = signature
        self._index = 1

    def __iter__(self) -> Iterator[str]:
        return self

    def has_next(self) -> bool:
        if self._index >= len(self._signature):
            raise MalformedDescriptorError(
                f"Invalid method signature: {self._signature} (missing ')')"
            )
        return self._signature[self._index] != ")"

    def __next__(self) -> str:
        if not self.has_next():
            raise StopIteration
        sig = self._signature
        start = self._index
        i = start
        while True:
            if i >= len(sig):
                raise MalformedDescriptorError(f"Invalid method signature: {sig}")
            ch = sig[i]
            if ch in PRIMITIVE_CODES:
                i += 1
                break
            if ch == "L":
                semi = sig.find(";", i + 1)
                if semi < 0:
                    raise MalformedDescriptorError(f"Invalid method signature: {sig}")
                i = semi + 1
                break
            if ch == "[":
                i += 1
                continue
            # 'V' lands here too: void is only legal as a return type.
            raise MalformedDescriptorError(
                f"Invalid method signature: {sig} (unexpected {ch!r} at {i})"
            )
        self._index = i
        return sig[start:i]
