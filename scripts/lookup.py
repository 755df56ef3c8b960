#!/usr/bin/env python3
"""Resolve one map click against the live providers and print every slot.

Credentials come from the environment:
- PLACEINFO_OPENWEATHER_API_KEY
- PLACEINFO_GEONAMES_USERNAME

Example::

    python scripts/lookup.py 35.6762 139.6503
    python scripts/lookup.py 35.6762 499.6503 --json --verbose
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

_repo = Path(__file__).resolve().parent.parent
_src = _repo / "src"
if _src.is_dir():
    sys.path.insert(0, str(_src))

from pyplaceinfo import (  # noqa: E402
    DisplayField,
    FieldState,
    FieldValue,
    PlaceInfoClient,
    PlaceInfoConfig,
    RecordingPresenter,
)


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Look up place information for a coordinate.")
    parser.add_argument("lat", type=float, help="Latitude in degrees (-90..90)")
    parser.add_argument("lng", type=float, help="Longitude in degrees; any value, wrapped to -180..180")
    parser.add_argument("--json", action="store_true", help="Print slot states as JSON")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable DEBUG logging")
    parser.add_argument(
        "--watch",
        action="store_true",
        help="Print each slot update as it lands instead of only the final record.",
    )
    return parser.parse_args()


def _print_update(name: DisplayField, value: FieldValue) -> None:
    print(f"  {name:<9} {value.render()}")


async def _run(args: argparse.Namespace) -> int:
    config = PlaceInfoConfig.from_env()
    presenter = RecordingPresenter(on_change=_print_update if args.watch else None)

    async with PlaceInfoClient(config) as client:
        orchestrator = client.create_orchestrator(presenter)
        record = await orchestrator.handle_click(args.lat, args.lng)

    if args.json:
        payload = {str(name): record[name].model_dump(mode="json") for name in DisplayField}
        print(json.dumps(payload, indent=2, ensure_ascii=False))
    else:
        for name, text in record.as_text().items():
            print(f"{name:<9} {text}")

    failed = [name for name in DisplayField if record[name].state == FieldState.FAILED]
    return 1 if failed else 0


def main() -> int:
    args = _parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return asyncio.run(_run(args))


if __name__ == "__main__":
    raise SystemExit(main())
