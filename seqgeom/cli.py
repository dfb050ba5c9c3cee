"""Command-line interface for fragment geometry conversion."""

import argparse
import json
import logging
import sys
from pathlib import Path

from .commands import build_commands, run_command
from .config import Config
from .models import FragmentGeomDesc
from .transducers import PiscemGeomDesc, SalmonSeparateGeomDesc


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def parse_args(argv=None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="seqgeom",
        description="Parse fragment geometry descriptions (FGDL) and convert them for piscem and salmon",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Check a geometry and print its canonical form
  seqgeom parse "1{b[16]u[12]x:}2{r:}"

  # Print the piscem and salmon geometry flags
  seqgeom convert "1{b[16]u[12]x:}2{r:}" --format all

  # Print (or run) the downstream commands
  seqgeom command "1{b[16]u[12]x:}2{r:}" --config tools.yaml --run
        """,
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    subparsers = parser.add_subparsers(dest="command", required=True, help="Command to run")

    parse_parser = subparsers.add_parser("parse", help="Parse and validate a geometry")
    setup_parse_parser(parse_parser)

    convert_parser = subparsers.add_parser("convert", help="Convert a geometry to tool flags")
    setup_convert_parser(convert_parser)

    command_parser = subparsers.add_parser("command", help="Build downstream tool commands")
    setup_command_parser(command_parser)

    return parser.parse_args(argv)


def setup_parse_parser(parser: argparse.ArgumentParser) -> None:
    """Setup arguments for parse command."""
    parser.add_argument("geometry", help="FGDL geometry description")
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the parsed geometry as JSON",
    )


def setup_convert_parser(parser: argparse.ArgumentParser) -> None:
    """Setup arguments for convert command."""
    parser.add_argument("geometry", help="FGDL geometry description")
    parser.add_argument(
        "--format",
        choices=["piscem", "salmon", "all"],
        default="all",
        help="Output format (default: all)",
    )


def setup_command_parser(parser: argparse.ArgumentParser) -> None:
    """Setup arguments for command command."""
    parser.add_argument("geometry", help="FGDL geometry description")
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to YAML configuration file",
    )
    parser.add_argument(
        "--tool",
        choices=["piscem", "salmon", "all"],
        default="all",
        help="Tool to build the command for (default: all)",
    )
    parser.add_argument(
        "--run",
        action="store_true",
        help="Run the commands instead of only printing them",
    )


def handle_parse(args: argparse.Namespace) -> int:
    """Handle parse command."""
    frag_desc = FragmentGeomDesc.from_str(args.geometry)
    if args.json:
        print(json.dumps(frag_desc.to_dict(), indent=2))
    else:
        kind = "complex" if frag_desc.is_complex_geometry() else "simple"
        print(f"{frag_desc}\t({kind} geometry)")
    return 0


def handle_convert(args: argparse.Namespace) -> int:
    """Handle convert command."""
    frag_desc = FragmentGeomDesc.from_str(args.geometry)

    if args.format in ("piscem", "all"):
        print(" ".join(PiscemGeomDesc.from_fragment_geom(frag_desc).to_args()))

    if args.format == "salmon" or (args.format == "all" and frag_desc.is_simple_geometry()):
        print(" ".join(SalmonSeparateGeomDesc.from_fragment_geom(frag_desc).to_args()))
    elif args.format == "all":
        print("Note: complex geometry, no salmon description produced", file=sys.stderr)
    return 0


def handle_command(args: argparse.Namespace) -> int:
    """Handle command command."""
    config = Config.from_yaml(args.config) if args.config else Config()
    frag_desc = FragmentGeomDesc.from_str(args.geometry)

    tools = None if args.tool == "all" else [args.tool]
    commands = build_commands(frag_desc, config, tools)
    if not commands:
        print("Error: no command can be built for this geometry", file=sys.stderr)
        return 1

    if not args.run:
        if config.output_format == "json":
            print(json.dumps(commands, indent=2))
        else:
            for cmd in commands.values():
                print(" ".join(cmd))
        return 0

    for tool, cmd in commands.items():
        returncode = run_command(cmd)
        if returncode != 0:
            logging.error(f"{tool} exited with status {returncode}")
            return returncode
    return 0


HANDLERS = {
    "parse": handle_parse,
    "convert": handle_convert,
    "command": handle_command,
}


def main(argv=None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    setup_logging(args.verbose)

    try:
        return HANDLERS[args.command](args)
    except (ValueError, FileNotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
