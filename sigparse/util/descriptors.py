"""Method-descriptor convenience helpers.

Tuple/list shaped wrappers around :class:`SignatureParser` for callers that
only need a one-shot answer.  Malformed descriptors raise, they are never
reported as zero parameters.
"""
from __future__ import annotations

from typing import List, Tuple

from sigparse.signature.parser import SignatureParser


def parse_descriptor_params(desc: str) -> Tuple[int, List[str]]:
    """Parse a method descriptor and return ``(param_count, type_list)``."""
    params = list(SignatureParser(desc).parameter_signatures())
    return len(params), params


def descriptor_slot_count(desc: str) -> int:
    """Count the stack *slots* consumed by the parameters.

    ``J`` (long) and ``D`` (double) each consume 2 slots; everything else 1.
    """
    return SignatureParser(desc).get_total_argument_slots()


def parameter_stack_offsets(desc: str) -> List[int]:
    parser = SignatureParser(desc).precompute()
    return [
        parser.get_slots_from_top_of_stack_for_parameter(i)
        for i in range(parser.get_num_parameters())
    ]
