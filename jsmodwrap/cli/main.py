"""
jsmodwrap CLI — Wrap or check the modules of a graph dump.
"""

import argparse
import json
import sys
from pathlib import Path

from jsmodwrap import __version__
from jsmodwrap.core.config import WrapOptions, load_options_file
from jsmodwrap.core.errors import InjectionError, ModuleOutputError
from jsmodwrap.core.logging import LogChannel, configure_logging, get_logger
from jsmodwrap.graph.allocator import create_module_id_factory
from jsmodwrap.graph.loader import load_graph
from jsmodwrap.selection.classifier import is_js_module
from jsmodwrap.serializer.process import process_modules
from jsmodwrap.validation.output_invariants import validate_modules


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jsmodwrap",
        description="Select, validate and wrap compiled JS modules for a bundle",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"jsmodwrap {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    wrap_parser = subparsers.add_parser("wrap", help="Wrap every JS module of a graph")
    wrap_parser.add_argument("graph", type=str, help="Path to a YAML/JSON graph dump")
    wrap_parser.add_argument(
        "--dev",
        action="store_true",
        default=None,
        help="Development build: add the relative module path as a debug name",
    )
    wrap_parser.add_argument(
        "--project-root",
        type=str,
        default=None,
        help="Root for debug names (default: config file, then current directory)",
    )
    wrap_parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="YAML options file with dev / projectRoot keys",
    )
    wrap_parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format (default: text)",
    )
    wrap_parser.add_argument(
        "-o",
        "--output",
        type=str,
        default=None,
        help="Output file path (default: stdout)",
    )

    check_parser = subparsers.add_parser("check", help="Report modules that cannot be wrapped")
    check_parser.add_argument("graph", type=str, help="Path to a YAML/JSON graph dump")

    for sub in (wrap_parser, check_parser):
        sub.add_argument(
            "--log-level",
            type=str,
            choices=["silent", "info", "verbose", "debug"],
            default=None,
            help="Log verbosity level (default: info, or JSMODWRAP_LOG_LEVEL env var)",
        )
        sub.add_argument(
            "--log-channel",
            type=str,
            default=None,
            help="Comma-separated log channels to show (select,classify,wrap,graph,system). Default: all",
        )

    return parser


def main(argv: list[str] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    channels = None
    if args.log_channel:
        channels = [ch.strip() for ch in args.log_channel.split(",")]
    configure_logging(level=args.log_level, channels=channels, force=True)

    if args.command == "wrap":
        return run_wrap(args)
    if args.command == "check":
        return run_check(args)

    return 0


def _build_options(args: argparse.Namespace, create_module_id) -> WrapOptions:
    if args.config:
        return load_options_file(
            args.config,
            create_module_id,
            dev=args.dev,
            project_root=args.project_root,
        )
    return WrapOptions(
        create_module_id=create_module_id,
        dev=bool(args.dev),
        project_root=args.project_root or str(Path.cwd()),
    )


def _load_modules(path: str):
    """Load the graph, or report why it cannot be loaded and return None."""
    try:
        return load_graph(path)
    except (FileNotFoundError, ValueError) as e:
        get_logger(LogChannel.SYSTEM).error("graph_load_failed", path=path, error=str(e))
        print(f"error: {e}", file=sys.stderr)
        return None


def run_wrap(args: argparse.Namespace) -> int:
    """Run the wrap command."""
    log = get_logger(LogChannel.SYSTEM)

    modules = _load_modules(args.graph)
    if modules is None:
        return 1
    create_module_id = create_module_id_factory()
    options = _build_options(args, create_module_id)

    try:
        wrapped = process_modules(modules, options)
    except (ModuleOutputError, InjectionError) as e:
        log.error("wrap_aborted", error=str(e), error_type=type(e).__name__)
        print(f"error: {e}", file=sys.stderr)
        return 1

    if args.format == "json":
        output = json.dumps(
            [
                {"path": m.path, "id": create_module_id(m.path), "code": code}
                for m, code in wrapped
            ],
            indent=2,
            ensure_ascii=False,
        )
    else:
        output = "\n".join(f"// {m.path}\n{code}" for m, code in wrapped)

    if args.output:
        Path(args.output).write_text(output)
    else:
        print(output)

    return 0


def run_check(args: argparse.Namespace) -> int:
    """Run the check command."""
    modules = _load_modules(args.graph)
    if modules is None:
        return 1
    js_modules = [m for m in modules if is_js_module(m)]
    passing, quarantine = validate_modules(js_modules)

    lines = [
        f"{len(passing)} module(s) OK, {len(quarantine)} quarantined, "
        f"{len(modules) - len(js_modules)} without JS output"
    ]
    for item in quarantine:
        lines.append(f"  {item.module_path}: {item.issue_summary}")
    print("\n".join(lines))

    return 1 if quarantine else 0


if __name__ == "__main__":
    sys.exit(main())
