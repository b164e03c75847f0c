#!/usr/bin/env python3
"""Print the editable parameter layout of an effect type.

Shows each parameter in display order with its kind, range or options and
default, i.e. exactly what the preset editor renders for that effect.

Usage:
    python tools/effect_params.py --list
    python tools/effect_params.py "STEP SLICER"
    python tools/effect_params.py LPF --json
"""

from __future__ import annotations
import argparse
import json
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))
from core.config import AppConfig
from fx.effects import EffectCatalog, default_catalog
from fx.params import RANGE, SELECT, TEXT, ParameterConfig
from fx.values import NoteOption


def _option_label(option, image_notes: bool) -> str:
    if isinstance(option, NoteOption):
        if image_notes and option.image_key:
            return f"[{option.image_key}]"
        return option.value
    return str(option)


def describe_parameter(param: ParameterConfig, image_notes: bool = True) -> dict:
    info = {"name": param.name, "label": param.display_name, "kind": param.kind}
    if param.kind == TEXT:
        return info
    if param.kind != SELECT:
        info["min"], info["max"], info["step"] = param.min_val, param.max_val, param.step
    if param.kind != RANGE:
        info["options"] = [_option_label(o, image_notes) for o in param.options]
    info["default"] = param.encode(param.decode(param.default))
    return info


def render_table(effect_type: str, catalog: EffectCatalog,
                 image_notes: bool = True) -> list[str]:
    lines = [f"{effect_type}"]
    for param in catalog.effect_parameters(effect_type):
        info = describe_parameter(param, image_notes)
        if param.kind == TEXT:
            lines.append(f"  --- {info['label']} ---")
            continue
        if param.kind == RANGE:
            span = f"{info['min']}..{info['max']}"
        elif param.kind == SELECT:
            span = f"{len(info['options'])} options"
        else:
            span = f"{info['min']}..{info['max']} | {len(info['options'])} notes"
        lines.append(f"  {info['label']:<16s} {param.kind:<9s} {span:<24s} "
                     f"default={info['default']}")
    return lines


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Show an effect's parameter layout")
    parser.add_argument("effect", nargs="?", help="Effect type, e.g. LPF")
    parser.add_argument("--list", "-l", action="store_true",
                        help="List effect types and exit")
    parser.add_argument("--json", action="store_true",
                        help="Emit the layout as JSON")
    args = parser.parse_args(argv)

    catalog = default_catalog()
    if args.list:
        for effect_type in catalog.effect_types():
            marker = "  (TRACK FX A only)" if catalog.is_track_a_only(effect_type) else ""
            print(f"{effect_type}{marker}")
        return 0

    if not args.effect:
        parser.print_usage()
        return 1
    if args.effect not in catalog:
        print(f"Unknown effect type: {args.effect}")
        return 1

    image_notes = AppConfig().use_image_notes
    if args.json:
        params = [describe_parameter(p, image_notes)
                  for p in catalog.effect_parameters(args.effect)]
        print(json.dumps({"effectType": args.effect, "parameters": params},
                         indent=2, ensure_ascii=False))
    else:
        print("\n".join(render_table(args.effect, catalog, image_notes)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
