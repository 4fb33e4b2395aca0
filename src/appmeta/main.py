"""Command-line entry point.

Subcommands:
  1. `appmeta init <path> [--api-spec SOURCE]`: create a new app.
  2. `appmeta root [path]`: print the app root enclosing path (default cwd).
  3. `appmeta components [path]`: print the app's component files, sorted.

Configuration comes from settings.load_settings(); --api-spec overrides the
configured default spec source. Invalid settings only abort `init`; the
other commands fall back to defaults.
"""

import argparse
import logging
import os
import sys

from .clusterspec import parse_cluster_spec
from .errors import MetadataError
from .fs import OsFileSystem
from .manager import find_manager, init_manager
from .settings import Settings, load_settings

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="appmeta", description="Manage application workspace metadata."
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="enable debug logging"
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p_init = sub.add_parser("init", help="create a new app")
    p_init.add_argument("path", help="directory to create")
    p_init.add_argument(
        "--api-spec",
        default=None,
        help="cluster spec source, e.g. file:/path/swagger.json",
    )

    p_root = sub.add_parser("root", help="print the enclosing app root")
    p_root.add_argument("path", nargs="?", default=None)

    p_comp = sub.add_parser("components", help="list component files")
    p_comp.add_argument("path", nargs="?", default=None)
    return parser


def _abspath(path: str | None) -> str:
    """Absolute, platform-native path for a CLI argument (default: cwd)."""
    return os.path.abspath(path) if path else os.getcwd()


def _cmd_init(args: argparse.Namespace, settings: Settings) -> None:
    source = args.api_spec or settings.api_spec
    if not source:
        raise MetadataError(
            "No cluster spec source; pass --api-spec or set api_spec in "
            f"{settings.settings_file}"
        )
    fs = OsFileSystem()
    spec = parse_cluster_spec(source, fs)
    m = init_manager(_abspath(args.path), spec, fs)
    print(f"Created app at {m.root_path}")


def _cmd_root(args: argparse.Namespace, settings: Settings) -> None:
    m = find_manager(_abspath(args.path), OsFileSystem())
    print(m.root_path)


def _cmd_components(args: argparse.Namespace, settings: Settings) -> None:
    m = find_manager(_abspath(args.path), OsFileSystem())
    for path in sorted(m.component_paths()):
        print(path)


_COMMANDS = {
    "init": _cmd_init,
    "root": _cmd_root,
    "components": _cmd_components,
}


def main(argv: list[str] | None = None) -> None:
    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=logging.WARNING,
    )

    try:
        settings = load_settings()
    except ValueError as e:
        # Only init reads api_spec; other commands fall back to defaults
        if args.command == "init":
            print(f"Error: {e}\n", file=sys.stderr)
            print("Check your settings.toml configuration.", file=sys.stderr)
            sys.exit(1)
        logger.warning("Ignoring invalid settings: %s", e)
        settings = Settings()

    level = logging.DEBUG if args.verbose else settings.log_level_value
    logging.getLogger("appmeta").setLevel(level)
    logger.debug("Running command %s", args.command)

    try:
        _COMMANDS[args.command](args, settings)
    except MetadataError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
