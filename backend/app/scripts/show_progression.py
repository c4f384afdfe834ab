from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path


def _resolve_backend_root() -> Path:
    # app/scripts/show_progression.py -> app -> backend
    return Path(__file__).resolve().parents[2]


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Print chord-shape positions for a chord sequence.")
    parser.add_argument("sequence", nargs="+", help='Chord roots, e.g. "C F Bb Eb"')
    parser.add_argument("--group", help="Chord group (defaults to DEFAULT_CHORD_GROUP)")
    parser.add_argument("--shape", help="Shape for the first chord (defaults to DEFAULT_START_SHAPE)")
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the same JSON the API returns",
    )
    args = parser.parse_args(argv)

    backend_root = _resolve_backend_root()
    sys.path.insert(0, str(backend_root))

    from app.api.v1.endpoints.progressions import create_progression  # pylint: disable=import-error
    from app.schemas import ProgressionRequest  # pylint: disable=import-error

    req = ProgressionRequest(
        sequence=" ".join(args.sequence),
        group=args.group,
        start_shape=args.shape,
    )
    result = create_progression(req)

    if not result.entries:
        print(f"No progression generated for group {result.group!r}")
        return 1

    if args.json:
        print(json.dumps(result.model_dump(), ensure_ascii=False, indent=2))
        return 0

    for entry in result.entries:
        print(f"{entry.label:<24} [{entry.frets_text}]")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
