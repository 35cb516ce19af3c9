"""
Ring Matrix Runner

Command-line entry point wiring the collaborators around the engine:

  parse     image -> segment file (one "<color><width>" line per path)
  stats     segment file -> frequency CSVs
  matrices  segment file -> all 1152 candidates as JSON (+ receipts)

Exit codes: 0 success, 1 any error (message on stderr).
"""

import argparse
import json
import sys
import xml.etree.ElementTree as ET
from typing import Dict, List, Optional, Tuple

from .core import (
    assert_double_run_equal,
    param_registry,
    Receipts,
    blake3_hash,
    serialize_segments,
    DeterminismError
)
from .driver import enumerate_candidates, enumeration_receipts
from .export import dump_candidates, write_candidates_json
from .kernel import Candidate, Segment, generate_permutations, UnknownSymbol, InputLengthMismatch
from .segments import (
    extract_segments_from_svg,
    read_segments,
    write_segments,
    StyleError,
    SegmentFormatError
)
from .stats import write_frequency_tables


def run_matrices(
    segments: List[Segment],
    workers: Optional[int] = None,
    determinism_check: bool = False
) -> Tuple[List[Candidate], Dict]:
    """
    Enumerate every candidate for a segment sequence.

    Permutation tables are built once here and shared by every candidate.

    Args:
        segments: Exactly 64 segments.
        workers: Process pool size (None = sequential).
        determinism_check: Enumerate twice and require identical receipts.

    Returns:
        Tuple of (candidates, receipts digest).

    Raises:
        InputLengthMismatch, UnknownSymbol: On malformed input (run aborted).
        DeterminismError: If the double run disagrees.
    """
    registry = param_registry()
    color_perms = generate_permutations(registry["color_alphabet"])
    width_perms = generate_permutations(registry["width_alphabet"])

    runs = []

    def build() -> Receipts:
        candidates = enumerate_candidates(segments, color_perms, width_perms, workers=workers)
        runs.append(candidates)
        return enumeration_receipts(segments, candidates)

    if determinism_check:
        digest = assert_double_run_equal(build)
    else:
        digest = build().digest()

    return runs[0], digest


def extraction_receipts(segments: List[Segment], source: str) -> Dict:
    receipts = Receipts("extract")
    receipts.put("source", source)
    receipts.put("segments.count", len(segments))
    receipts.put("segments.hash", blake3_hash(serialize_segments(segments)))
    return receipts.digest()


def _cmd_parse(args) -> int:
    segments = extract_segments_from_svg(args.image)
    digest = extraction_receipts(segments, str(args.image))

    if args.output:
        write_segments(segments, args.output)
        print(f"{len(segments)} segments written to: {args.output}", file=sys.stderr)
    else:
        for color, width in segments:
            print(f"{color}{width}")

    print(f"segments.hash: {digest['payload']['segments.hash']}", file=sys.stderr)
    return 0


def _cmd_stats(args) -> int:
    segments = read_segments(args.segments)
    for path in write_frequency_tables(segments, args.outdir):
        print(f"Frequency table written to: {path}", file=sys.stderr)
    return 0


def _cmd_matrices(args) -> int:
    segments = read_segments(args.segments)
    candidates, digest = run_matrices(
        segments,
        workers=args.workers,
        determinism_check=args.determinism_check
    )

    if args.output:
        write_candidates_json(candidates, args.output)
        print(f"{len(candidates)} candidates written to: {args.output}", file=sys.stderr)
    else:
        dump_candidates(candidates, sys.stdout)
        sys.stdout.write("\n")

    if args.receipts:
        with open(args.receipts, 'w') as f:
            json.dump(digest, f, indent=2)
        print(f"Receipts written to: {args.receipts}", file=sys.stderr)
    else:
        print(f"section_hash: {digest['section_hash']}", file=sys.stderr)

    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ringbit",
        description="Ring matrix enumerator: segments -> 1152 candidate 16x16 bit matrices",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Extract segments from the image
  ringbit parse image.svg --output out.txt

  # Segment / color / width frequency tables
  ringbit stats out.txt --outdir stats

  # All candidates, four worker processes, double-run check
  ringbit matrices out.txt --output matrices.json --workers 4 --determinism-check
        """
    )
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_parse = sub.add_parser("parse", help="Extract segments from path styles")
    p_parse.add_argument("image", type=str, help="Path to the SVG image")
    p_parse.add_argument(
        "--output",
        type=str,
        default=None,
        help="Segment file to write. Default: print to stdout."
    )
    p_parse.set_defaults(func=_cmd_parse)

    p_stats = sub.add_parser("stats", help="Write frequency tables")
    p_stats.add_argument("segments", type=str, help="Path to the segment file")
    p_stats.add_argument(
        "--outdir",
        type=str,
        default="stats",
        help="Directory for the CSV files. Default: stats"
    )
    p_stats.set_defaults(func=_cmd_stats)

    p_mat = sub.add_parser("matrices", help="Enumerate all candidate matrices")
    p_mat.add_argument("segments", type=str, help="Path to the segment file")
    p_mat.add_argument(
        "--output",
        type=str,
        default=None,
        help="JSON file for the candidates. Default: print to stdout."
    )
    p_mat.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Worker processes. Default: sequential."
    )
    p_mat.add_argument(
        "--determinism-check",
        action="store_true",
        help="Enumerate twice and compare receipts. Default: False."
    )
    p_mat.add_argument(
        "--receipts",
        type=str,
        default=None,
        help="JSON file for the run receipts. Default: print section hash to stderr."
    )
    p_mat.set_defaults(func=_cmd_matrices)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        return args.func(args)
    except FileNotFoundError as e:
        print(f"Error: File not found: {e.filename}", file=sys.stderr)
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
    except ET.ParseError as e:
        print(f"Error: Invalid SVG: {e}", file=sys.stderr)
    except (StyleError, SegmentFormatError, UnknownSymbol, InputLengthMismatch, DeterminismError) as e:
        print(f"Error: {e}", file=sys.stderr)
    except (ValueError, RuntimeError) as e:
        print(f"Error: {e}", file=sys.stderr)

    return 1


if __name__ == "__main__":
    sys.exit(main())
