"""Exception hierarchy for descriptor parsing."""
from __future__ import annotations


class SignatureError(Exception):
    pass


class InvalidSignatureError(SignatureError, ValueError):
    """Raised at construction when a method signature does not start with ``(``."""


class MalformedDescriptorError(SignatureError, ValueError):
    """Raised when a descriptor violates the type-token grammar."""


class ParameterIndexError(SignatureError, IndexError):
    pass


class LoaderError(Exception):
    pass
