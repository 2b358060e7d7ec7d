from __future__ import annotations

import argparse
import sys
from typing import Dict, List, Optional

from sigparse.bytecode.dex_queries import all_methods, method_name, methods_for_class
from sigparse.bytecode.smali import invoke_sites, parse_invoke_sig
from sigparse.config import RunConfig, RunContext
from sigparse.errors import LoaderError, SignatureError
from sigparse.log import Logger
from sigparse.report import FORMATS, describe_signature, render_description, render_scan
from sigparse.signature.invocation import InvokeCallSite, invoke_output_resolver
from sigparse.signature.parser import SignatureParser


def _non_negative_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {text!r}") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {value}")
    return value


def parse_args(argv: List[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="jsig",
        description="Decode JVM/Dalvik method descriptors and their stack-slot layout.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    parser.add_argument("--format", dest="output_format", choices=FORMATS, default="text")
    sub = parser.add_subparsers(dest="command", required=True)

    describe = sub.add_parser("describe", help="print the parameter tokens of one descriptor")
    describe.add_argument("descriptor", help="method descriptor, e.g. '(ILjava/lang/String;[D)V'")

    scan = sub.add_parser("scan", help="list invoke call sites of an APK or DEX file")
    scan.add_argument("target", help="path to an .apk or .dex file")
    scan.add_argument("--class", dest="class_filter", default=None, help="only methods of this class")
    scan.add_argument("--limit", type=_non_negative_int, default=0, help="stop after N call sites (0 = no limit)")
    return parser.parse_args(argv)


def build_context(args: argparse.Namespace) -> RunContext:
    config = RunConfig(
        output_format=args.output_format,
        verbose=args.verbose,
        class_filter=getattr(args, "class_filter", None),
        limit=getattr(args, "limit", 0),
    )
    return RunContext(config=config, logger=Logger(verbose=args.verbose))


def run_describe(ctx: RunContext, descriptor: str) -> int:
    try:
        info = describe_signature(SignatureParser(descriptor))
    except SignatureError as exc:
        ctx.logger.error(str(exc))
        return 1
    sys.stdout.write(render_description(info, ctx.config.output_format))
    return 0


def collect_call_sites(ctx: RunContext) -> List[Dict[str, object]]:
    """Describe every invoke call site in ``ctx.analysis``.

    Call sites whose descriptor cannot be parsed are logged and counted under
    ``malformed`` in ``ctx.metrics``.
    """
    cfg = ctx.config
    if cfg.class_filter:
        methods = methods_for_class(ctx.analysis, cfg.class_filter, include_inner=True)
    else:
        methods = all_methods(ctx.analysis)
    metrics = ctx.metrics
    metrics.update({"methods": 0, "call_sites": 0, "malformed": 0})
    sites: List[Dict[str, object]] = []
    for m in methods:
        if not hasattr(m, "get_code") or m.get_code() is None:
            ctx.logger.debug(f"method skipped reason=no_code method={method_name(m)}")
            continue
        metrics["methods"] += 1
        for site in invoke_sites(m):
            if cfg.limit > 0 and len(sites) >= cfg.limit:
                return sites
            metrics["call_sites"] += 1
            call_site = InvokeCallSite(site.instruction)
            try:
                descriptor = call_site.get_signature(invoke_output_resolver)
                parser = SignatureParser(descriptor)
                num_params = parser.get_num_parameters()
                slots = parser.get_total_argument_slots()
            except SignatureError as exc:
                metrics["malformed"] += 1
                ctx.logger.warning(f"call site skipped method={method_name(m)} offset={site.offset} error={exc}")
                continue
            cls, name, _ = parse_invoke_sig(site.raw)
            sites.append(
                {
                    "method": method_name(m),
                    "offset": site.offset,
                    "opcode": site.opcode,
                    "target": f"{cls}->{name}",
                    "descriptor": descriptor,
                    "parameters": num_params,
                    "argument_slots": slots,
                }
            )
    return sites


def run_scan(ctx: RunContext, target: str) -> int:
    from sigparse.loader import load_target

    try:
        ctx.analysis = load_target(target)
    except LoaderError as exc:
        ctx.logger.error(str(exc))
        return 1
    sites = collect_call_sites(ctx)
    ctx.logger.debug(
        f"scan done methods={ctx.metrics['methods']} call_sites={ctx.metrics['call_sites']}"
        f" malformed={ctx.metrics['malformed']}"
    )
    sys.stdout.write(render_scan(sites, ctx.metrics, ctx.config.output_format))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    ctx = build_context(args)
    if args.command == "describe":
        return run_describe(ctx, args.descriptor)
    return run_scan(ctx, args.target)
