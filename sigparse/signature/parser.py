"""Method-signature parser: parameter tokens, return type and stack offsets."""
from __future__ import annotations

import logging
import threading
from typing import List, Optional

from sigparse.errors import InvalidSignatureError, MalformedDescriptorError, ParameterIndexError
from sigparse.signature.tokenizer import ParameterSignatureIterator

_log = logging.getLogger(__name__)

_WIDE_TYPES = ("J", "D")


class SignatureParser:
    """Parse one method signature such as ``(ILjava/lang/String;[D)V``.

    The signature is fixed at construction.  Only its prefix is validated
    eagerly; the parameter section is checked as it is tokenized.  The
    cumulative slot-width table behind
    :meth:`get_slots_from_top_of_stack_for_parameter` is built on first use
    and reused afterwards.
    """

    def __init__(self, signature: str) -> None:
        if not signature.startswith("("):
            raise InvalidSignatureError(f"Bad method signature: {signature}")
        self._signature = signature
        self._total_argument_size = 0
        self._parameter_offset: Optional[List[int]] = None
        self._offset_lock = threading.Lock()

    def __str__(self) -> str:
        return self._signature

    def __repr__(self) -> str:
        return f"SignatureParser({self._signature!r})"

    @property
    def signature(self) -> str:
        return self._signature

    # ------------------------------------------------------------------
    # Offsets
    # ------------------------------------------------------------------

    def _calculate_offsets(self) -> List[int]:
        offsets = self._parameter_offset
        if offsets is not None:
            return offsets
        with self._offset_lock:
            if self._parameter_offset is None:
                total = 0
                table: List[int] = []
                for sig in self.parameter_signatures():
                    total += self.get_num_slots_for_type(sig)
                    table.append(total)
                self._total_argument_size = total
                self._parameter_offset = table
                _log.debug("offset table built for %s: %s", self._signature, table)
            return self._parameter_offset

    def precompute(self) -> "SignatureParser":
        """Build the offset table now, e.g. before sharing across threads."""
        self._calculate_offsets()
        return self

    def get_total_argument_slots(self) -> int:
        self._calculate_offsets()
        return self._total_argument_size

    def get_slots_from_top_of_stack_for_parameter(self, param_num: int) -> int:
        """Return how many stack slots lie above parameter *param_num*.

        Assumes every argument is on the operand stack, first parameter
        deepest, so the last parameter is always ``0``.
        """
        offsets = self._calculate_offsets()
        if param_num < 0 or param_num >= len(offsets):
            raise ParameterIndexError(
                f"Asked for parameter {param_num} of {self._signature}"
            )
        return self._total_argument_size - offsets[param_num]

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def parameter_signatures(self) -> ParameterSignatureIterator:
        """Return a new iterator over the parameter type signatures, in order."""
        return ParameterSignatureIterator(self._signature)

    def get_return_type_signature(self) -> str:
        end_of_params = self._signature.rfind(")")
        if end_of_params < 0:
            raise MalformedDescriptorError(f"Bad method signature: {self._signature}")
        return self._signature[end_of_params + 1 :]

    def get_num_parameters(self) -> int:
        count = 0
        for _ in self.parameter_signatures():
            count += 1
        return count

    def get_parameter(self, pos: int) -> str:
        if pos >= 0:
            for count, sig in enumerate(self.parameter_signatures()):
                if count == pos:
                    return sig
        raise ParameterIndexError(f"Asked for parameter {pos} of {self._signature}")

    @staticmethod
    def is_reference_type(signature: str) -> bool:
        """Return True if *signature* denotes an object or array type."""
        return signature.startswith("L") or signature.startswith("[")

    @staticmethod
    def get_num_slots_for_type(signature: str) -> int:
        """Stack slots a value of type *signature* occupies.

        ``long`` and ``double`` take 2; everything else, arrays of them
        included, takes 1.
        """
        if signature in _WIDE_TYPES:
            return 2
        return 1

    @staticmethod
    def get_num_parameters_for_invocation(call_site, resolver) -> int:
        from sigparse.signature.invocation import get_num_parameters_for_invocation

        return get_num_parameters_for_invocation(call_site, resolver)
