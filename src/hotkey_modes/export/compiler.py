from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from hotkey_modes.config.errors import ConfigReadError, ParseError
from hotkey_modes.config.frontend import ConfigFrontend, find_config
from hotkey_modes.config.options import ParserOptions, load_options
from hotkey_modes.config.registry import ModeRegistry
from hotkey_modes.config.serializer import dump_config

from .backend import BindingTableBackend

logger = logging.getLogger(__name__)


def compile_config(
    in_path: str | Path,
    out_path: str | Path,
    *,
    options: ParserOptions | None = None,
    indent: int | None = 2,
) -> ModeRegistry:
    """End-to-end compilation: config file -> binding table JSON file."""

    in_path = Path(in_path)
    out_path = Path(out_path)

    frontend = ConfigFrontend(options)
    registry = frontend.load(in_path)

    backend = BindingTableBackend()
    table = backend.compile(registry, description=str(in_path))

    json_str = table.model_dump_json(indent=indent, exclude_none=True)
    out_path.write_text(json_str + "\n", encoding="utf-8")
    logger.info("wrote %d modes to %s", len(table.modes), out_path)
    return registry


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="hotkey-modes",
        description="Check a modal hotkey config and optionally export or reformat it.",
    )
    parser.add_argument(
        "config",
        nargs="?",
        default=None,
        help="config path (default: $XDG_CONFIG_HOME/skhd/skhdrc or ~/.skhdrc)",
    )
    parser.add_argument("--options", help="TOML file with parser options")
    output = parser.add_mutually_exclusive_group()
    output.add_argument("--json", metavar="OUT", help="write the binding table as JSON to OUT")
    output.add_argument(
        "--dump", action="store_true", help="print the parsed config in canonical form"
    )
    parser.add_argument("--indent", type=int, default=2, help="JSON indent (default: 2)")
    parser.add_argument("--verbose", "-v", action="store_true", help="log each parsed statement")

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = args.config if args.config is not None else find_config()
    if config is None:
        print("hotkey-modes: no config file found", file=sys.stderr)
        return 1

    try:
        options = load_options(args.options) if args.options else ParserOptions()
        if args.json:
            registry = compile_config(config, args.json, options=options, indent=args.indent)
        else:
            registry = ConfigFrontend(options).load(config)
    except ConfigReadError as e:
        print(f"{e.path}: {e} [FATAL]", file=sys.stderr)
        return 1
    except ParseError:
        # Already reported through the logger.
        return 1

    if args.dump:
        sys.stdout.write(dump_config(registry))
    elif not args.json:
        print(f"{config}: {len(registry)} modes, {len(registry.hotkeys())} hotkeys")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
