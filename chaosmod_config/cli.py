"""Command line interface for the ChaosModV settings editor."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, TextIO

from .check_tree import CheckTree
from .effects import EffectCategory
from .gui.controller import SettingsController
from .gui.state import ScalarForm
from .log_utils import setup_logging
from .workdir import resolve_layout


def _mark(checked: bool) -> str:
    return "[x]" if checked else "[ ]"


def format_tree(controller: SettingsController) -> str:
    tree: CheckTree = controller.tree  # type: ignore[assignment]
    id_by_leaf = {leaf: effect_id for effect_id, leaf in controller.leaf_by_id.items()}
    lines: List[str] = []
    for root in tree.roots():
        lines.append(f"{_mark(tree.is_checked(root))} {tree.label(root)}")
        for child in tree.children(root):
            effect_id = id_by_leaf.get(child)
            prefix = f"{effect_id:>4}" if effect_id is not None else "    "
            lines.append(f"    {_mark(tree.is_checked(child))} {prefix}  {tree.label(child)}")
    return "\n".join(lines)


def format_summary(controller: SettingsController) -> str:
    form: ScalarForm = controller.form
    return "\n".join(
        [
            f"Folder:              {controller.layout.root}",
            f"New effect spawn:    {form.spawn_interval or '(default)'}",
            f"Timed effect length: {form.timed_duration or '(default)'}",
            f"Seed:                {form.seed or '(random)'}",
            f"Enabled effects:     {len(controller.enabled_effect_ids())}/{len(controller.registry)}",
        ]
    )


def _category(name: str) -> EffectCategory:
    try:
        return EffectCategory.parse(name)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def _non_negative(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}") from None
    if value < 0:
        raise argparse.ArgumentTypeError("must be >= 0")
    return value


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Edit ChaosModV config.ini / effects.ini.")
    ap.add_argument("--workdir", type=Path, default=None, help="Folder holding config.ini and effects.ini (default: cwd)")
    ap.add_argument("--gui", action="store_true", help="Open the settings window instead")
    ap.add_argument("--list", action="store_true", help="Print the effects tree with its check state")
    ap.add_argument("--verbose", "-v", action="store_true")

    ap.add_argument("--enable", type=int, action="append", default=[], metavar="ID", help="Enable an effect by id")
    ap.add_argument("--disable", type=int, action="append", default=[], metavar="ID", help="Disable an effect by id")
    ap.add_argument("--enable-category", type=_category, action="append", default=[], metavar="NAME")
    ap.add_argument("--disable-category", type=_category, action="append", default=[], metavar="NAME")

    ap.add_argument("--spawn-time", type=_non_negative, default=None, help="Seconds between new effects")
    ap.add_argument("--timed-duration", type=_non_negative, default=None, help="Duration of timed effects in seconds")
    ap.add_argument("--seed", type=int, default=None, help="Random seed; negative means random")
    return ap


def main(argv: Optional[List[str]] = None, *, out: Optional[TextIO] = None) -> int:
    out = out or sys.stdout
    args = build_parser().parse_args(argv)

    if args.gui:
        from .gui.app import main as gui_main

        gui_main(["--workdir", str(args.workdir)] if args.workdir else [])
        return 0

    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    controller = SettingsController(resolve_layout(args.workdir))
    controller.events.on_incomplete_config(
        lambda: print("warning: config.ini was incomplete and has been regenerated", file=sys.stderr)
    )
    controller.start()

    changed = False
    try:
        for cat in args.enable_category:
            controller.set_category_enabled(cat, True)
            changed = True
        for cat in args.disable_category:
            controller.set_category_enabled(cat, False)
            changed = True
        for effect_id in args.enable:
            controller.set_effect_enabled(effect_id, True)
            changed = True
        for effect_id in args.disable:
            controller.set_effect_enabled(effect_id, False)
            changed = True
    except KeyError as e:
        print(f"error: {e.args[0]}", file=sys.stderr)
        return 2

    if args.spawn_time is not None:
        controller.form.spawn_interval = str(args.spawn_time)
        changed = True
    if args.timed_duration is not None:
        controller.form.timed_duration = str(args.timed_duration)
        changed = True
    if args.seed is not None:
        controller.form.seed = str(args.seed) if args.seed >= 0 else ""
        changed = True

    if changed:
        controller.save()

    if args.list:
        print(format_tree(controller), file=out)
    else:
        print(format_summary(controller), file=out)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
