"""Command-line front door for polynav.

Parses CLI options, resolves the workspace configuration, and dispatches to
the workspace commands with a terminal-backed host.
"""

from __future__ import annotations

import argparse
import json
import sys
from functools import partial
from pathlib import Path

from . import commands
from .build import start_build
from .editor import open_in_editor
from .log import configure_logging
from .picker import run_picker
from .runtime import config as settings
from .runtime.config import SETTING_KEYS, ConfigStore, config_to_settings
from .workspace.counterpart import counterpart_for
from .workspace.types import TargetKind, WorkspaceConfig, WorkspaceConfigError

_LIST_KINDS = {
    "components": TargetKind.COMPONENT,
    "bases": TargetKind.BASE,
    "projects": TargetKind.PROJECT,
}


def confirm_on_terminal(question: str) -> bool:
    """Ask a yes/no question; anything but an explicit yes declines."""
    try:
        answer = input(f"{question} [y/N] ")
    except EOFError:
        return False
    return answer.strip().lower() in {"y", "yes"}


def terminal_host(no_color: bool = False) -> commands.CommandHost:
    """Build the host used when running from a terminal."""
    return commands.CommandHost(
        choose=partial(run_picker, no_color=no_color),
        open_path=open_in_editor,
        launch=start_build,
        confirm=confirm_on_terminal,
    )


def _file_argument(value: str) -> Path:
    """argparse type for file paths; directories are rejected."""
    path = Path(value).absolute()
    if path.is_dir():
        raise argparse.ArgumentTypeError(f"not a file: {value}")
    return path


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="polynav",
        description="Navigate a components/bases/projects workspace from the terminal.",
    )
    parser.add_argument("--root", type=Path, default=None, help="Workspace root (default: env, settings, or discovery).")
    parser.add_argument("--no-color", action="store_true", help="Disable color in the picker.")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Log more (repeat for debug output).")

    sub = parser.add_subparsers(dest="command")
    sub.add_parser("component", help="Pick a component and open it.")
    sub.add_parser("base", help="Pick a base and open it.")
    sub.add_parser("jump", help="Open the components directory.")
    sub.add_parser("build", help="Pick a project and start its build.")

    toggle = sub.add_parser("toggle", help="Open the source/test counterpart of FILE.")
    toggle.add_argument("file", type=_file_argument)

    counterpart = sub.add_parser("counterpart", help="Print the source/test counterpart of FILE.")
    counterpart.add_argument("file", type=lambda value: Path(value).absolute())

    listing = sub.add_parser("list", help="Print workspace entries as NAME<TAB>PATH rows.")
    listing.add_argument("kind", choices=sorted(_LIST_KINDS))

    config_parser = sub.add_parser("config", help="Show or change persisted settings.")
    config_sub = config_parser.add_subparsers(dest="config_command", required=True)
    config_sub.add_parser("show", help="Print the effective settings as JSON.")
    config_sub.add_parser("path", help="Print the settings file location.")
    setter = config_sub.add_parser("set", help="Persist one setting.")
    setter.add_argument("key", choices=SETTING_KEYS)
    setter.add_argument("value")
    return parser


def _run_palette(config: WorkspaceConfig, host: commands.CommandHost) -> str | None:
    labels = [label for _, label in commands.COMMANDS]
    choice = host.choose("Command", labels)
    if choice is None:
        return None
    command_id = commands.COMMANDS[choice][0]
    if command_id == "toggle":
        return "Toggle needs a file: polynav toggle FILE"
    return _dispatch(command_id, config, host)


def _dispatch(command_id: str, config: WorkspaceConfig, host: commands.CommandHost) -> str | None:
    if command_id == "component":
        return commands.find_component(config, host)
    if command_id == "base":
        return commands.find_base(config, host)
    if command_id == "jump":
        return commands.jump_to_components_dir(config, host)
    if command_id == "build":
        return commands.run_build_for_selected_project(config, host)
    raise ValueError(f"unknown command: {command_id}")


def _run_config(args: argparse.Namespace, store: ConfigStore) -> None:
    if args.config_command == "path":
        print(settings.CONFIG_PATH)
        return
    if args.config_command == "set":
        store.update(**{args.key: args.value})
        if not store.last_save_ok:
            print(f"Settings not persisted to {settings.CONFIG_PATH}", file=sys.stderr)
    print(json.dumps(config_to_settings(store.current), indent=2))


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and run one polynav command.

    Messages from commands go to stderr; listings and computed paths go to
    stdout so they can be piped.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    root_override = args.root.expanduser().absolute() if args.root is not None else None
    try:
        store = ConfigStore(root_override=root_override)
        if args.command == "config":
            _run_config(args, store)
            return
    except WorkspaceConfigError as exc:
        raise SystemExit(f"Invalid configuration: {exc}") from exc

    config = store.current
    if args.command == "list":
        for row in commands.workspace_listing(config, _LIST_KINDS[args.kind]):
            print(row)
        return
    if args.command == "counterpart":
        target = counterpart_for(args.file, config)
        if target is None:
            raise SystemExit(f"No source/test counterpart for {args.file}")
        print(target)
        return

    host = terminal_host(no_color=args.no_color)
    if args.command is None:
        message = _run_palette(config, host)
    elif args.command == "toggle":
        message = commands.toggle_source_test_file(config, host, args.file)
    else:
        message = _dispatch(args.command, config, host)
    if message:
        print(message, file=sys.stderr)


if __name__ == "__main__":
    main()
