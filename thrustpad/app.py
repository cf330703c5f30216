"""Command line entry point driving the controller without a display."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Sequence

from thrustpad.controller import Controller
from thrustpad.signals import Announcer, Printer

_ACTIONS: dict[str, Callable[[Controller], None]] = {
    "left": Controller.move_left,
    "right": Controller.move_right,
    "thrust": Controller.apply_thrust,
    "wait": lambda controller: None,
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="thrustpad",
        description="Apply actions to the object, one frame per action, and print its position.",
    )
    parser.add_argument(
        "actions",
        nargs="*",
        metavar="ACTION",
        help="one of: " + ", ".join(_ACTIONS),
    )
    parser.add_argument(
        "--frames",
        type=int,
        default=0,
        help="extra frames to simulate after the actions",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the demo and print the final position as 'x=<x> y=<y>'."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    unknown = [action for action in args.actions if action not in _ACTIONS]
    if unknown:
        parser.error(f"unknown action(s): {', '.join(unknown)}")
    if args.frames < 0:
        parser.error("--frames must not be negative")

    announcer = Announcer()
    printer = Printer()
    announcer.print_it.connect(printer.report)
    announcer.print_it.emit()

    controller = Controller()
    for action in args.actions:
        _ACTIONS[action](controller)
        controller.update_state()
    controller.run(args.frames)

    print(f"x={controller.x:g} y={controller.y:g}")
    return 0