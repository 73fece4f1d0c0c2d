#!/usr/bin/env python3
"""
mapgen - Command Line Entry Point

Generates one map and prints its statistics and warnings, optionally with
an ASCII rendering and the structural check report.
"""

import argparse
import logging
import sys

from mapgen import LayoutConverter, check_map, generate_map
from mapgen.validation import placement_padding
from mapgen.settings import Era, Setting, default_settings, load_settings, save_settings


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate a 2D level layout")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed (defaults to the settings seed)")
    parser.add_argument("--rooms", type=int, default=None, help="Target room count")
    parser.add_argument("--era", choices=[e.value for e in Era], default=Era.INDUSTRIAL.value)
    parser.add_argument("--setting", choices=[s.value for s in Setting],
                        default=Setting.BUILDING.value)
    parser.add_argument("--settings", dest="settings_file", default=None,
                        help="Load settings from a JSON file instead of a preset")
    parser.add_argument("--save-settings", default=None,
                        help="Write the settings used to a JSON file")
    parser.add_argument("--ascii", action="store_true", help="Print the map as ASCII")
    parser.add_argument("--check", action="store_true", help="Run the map checks")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(levelname)s %(name)s: %(message)s")

    if args.settings_file:
        settings = load_settings(args.settings_file)
        if settings is None:
            print(f"[MAIN] Could not load settings from {args.settings_file}")
            return 1
    else:
        settings = default_settings(Era(args.era), Setting(args.setting))
    if args.rooms is not None:
        settings = settings.with_changes(rooms_count=args.rooms)

    result = generate_map(settings, seed=args.seed)
    if args.save_settings:
        path = save_settings(result.settings, args.save_settings)
        print(f"[MAIN] Settings saved to {path}")

    print("[MAIN] Layout statistics:")
    for key, value in result.metrics['stats'].items():
        print(f"  {key}: {value}")
    if result.warnings:
        print(f"[MAIN] {len(result.warnings)} warning(s):")
        for warning in result.warnings:
            print(f"  {warning}")

    if args.ascii:
        print(LayoutConverter.to_ascii(result.map))

    if args.check:
        report = check_map(result.map, padding=placement_padding(result.settings))
        print(report.report())
        return 0 if report.passed else 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
