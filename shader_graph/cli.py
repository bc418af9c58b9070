"""
Command line entry point.

    python -m shader_graph build graph.json -o out.fx [--encoding cp932]
    python -m shader_graph kinds
"""

import argparse
import logging
import sys
from typing import List, Optional

from .codegen.assembler import build_effect
from .codegen.hlsl import generate_code
from .errors import ShaderGraphError
from .logger import log_error, log_info, setup_logger
from .nodes import categories, kinds_in_category, lookup
from . import persistence


def _build(args) -> int:
    document = persistence.load_graph(args.graph)
    root = args.root if args.root is not None else document.active_node
    if root is None:
        log_error(f"{args.graph} has no active node; pass --root")
        return 1

    gen_code = generate_code(document.graph, root, document.options)
    text = build_effect(gen_code)

    if args.output:
        persistence.save_effect(args.output, text, encoding=args.encoding)
        log_info(f"Wrote {args.output}")
    else:
        sys.stdout.write(text)
    return 0


def _kinds(args) -> int:
    for category in categories():
        print(category)
        for kind in kinds_in_category(category):
            info = lookup(kind)
            ins = ", ".join(f"{s.type} {s.name}" for s in info.inputs)
            outs = ", ".join(f"{s.type} {s.name}" for s in info.outputs)
            print(f"  {info.label}({ins}) -> ({outs})")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="shader_graph", description="MME shader graph tools")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    build = sub.add_parser("build", help="generate an .fx effect from a saved graph")
    build.add_argument("graph", help="graph JSON file")
    build.add_argument("-o", "--output", help="effect file to write (stdout when omitted)")
    build.add_argument("--root", type=int, default=None, help="root node id (defaults to the saved active node)")
    build.add_argument("--encoding", default=persistence.DEFAULT_ENCODING, help="effect file encoding")
    build.set_defaults(func=_build)

    kinds = sub.add_parser("kinds", help="list node kinds by category")
    kinds.set_defaults(func=_kinds)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logger(logging.DEBUG if args.verbose else logging.INFO)
    try:
        return args.func(args)
    except (ShaderGraphError, LookupError, OSError) as e:
        log_error(str(e))
        return 1
