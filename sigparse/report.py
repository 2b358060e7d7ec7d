"""Rendering of describe/scan results as plain text or YAML."""
from __future__ import annotations

from typing import Dict, List

import yaml

from sigparse.signature.parser import SignatureParser

FORMATS = ("text", "yaml")


def describe_signature(parser: SignatureParser) -> Dict[str, object]:
    parser.precompute()
    params = []
    for i, sig in enumerate(parser.parameter_signatures()):
        params.append(
            {
                "type": sig,
                "reference": SignatureParser.is_reference_type(sig),
                "slots": SignatureParser.get_num_slots_for_type(sig),
                "slots_from_top": parser.get_slots_from_top_of_stack_for_parameter(i),
            }
        )
    return {
        "descriptor": parser.signature,
        "parameters": params,
        "return": parser.get_return_type_signature(),
        "argument_slots": parser.get_total_argument_slots(),
    }


def render_description(info: Dict[str, object], fmt: str) -> str:
    if fmt == "yaml":
        return yaml.safe_dump(info, sort_keys=False)
    params = info["parameters"]
    lines = [p["type"] for p in params]
    lines.append(f"{len(params)} parameter(s)")
    lines.append(f"returns {info['return']}")
    offsets = " ".join(str(p["slots_from_top"]) for p in params)
    lines.append(f"{info['argument_slots']} argument slot(s)" + (f", from top: {offsets}" if offsets else ""))
    return "\n".join(lines) + "\n"


def render_scan(sites: List[Dict[str, object]], metrics: Dict[str, int], fmt: str) -> str:
    if fmt == "yaml":
        return yaml.safe_dump({"call_sites": sites, "summary": metrics}, sort_keys=False)
    lines = []
    for site in sites:
        lines.append(
            f"{site['method']} @{site['offset']:#06x} {site['opcode']} {site['target']}{site['descriptor']}"
            f" params={site['parameters']} slots={site['argument_slots']}"
        )
    summary = ", ".join(f"{k}={v}" for k, v in metrics.items())
    lines.append(f"summary: {summary}")
    return "\n".join(lines) + "\n"
