"""
Frequency Tables

Occurrence counts of whole segments, colors and widths, written as
"label,count" CSV files. Rows are sorted by label.
"""

import os
from collections import Counter
from pathlib import Path
from typing import Dict, Sequence, Tuple, Union

PathLike = Union[str, Path]


def _table(labels) -> Dict[str, int]:
    counts = Counter(labels)
    return {label: counts[label] for label in sorted(counts)}


def segment_frequencies(segments: Sequence[Tuple[str, str]]) -> Dict[str, int]:
    """Counts keyed by "<color><width>"."""
    return _table(f"{c}{w}" for c, w in segments)


def color_frequencies(segments: Sequence[Tuple[str, str]]) -> Dict[str, int]:
    return _table(c for c, _ in segments)


def width_frequencies(segments: Sequence[Tuple[str, str]]) -> Dict[str, int]:
    return _table(w for _, w in segments)


def write_frequency_csv(table: Dict[str, int], path: PathLike) -> None:
    with open(path, 'w') as f:
        for label, count in table.items():
            f.write(f"{label},{count}\n")


def write_frequency_tables(segments: Sequence[Tuple[str, str]], outdir: PathLike) -> list[Path]:
    """
    Write segment.frequency.csv, color.frequency.csv and width.frequency.csv.

    Args:
        segments: Segment sequence.
        outdir: Output directory (created if missing).

    Returns:
        list[Path]: Written files, in the order above.
    """
    os.makedirs(outdir, exist_ok=True)
    outdir = Path(outdir)

    written = []
    for name, table in (
        ("segment", segment_frequencies(segments)),
        ("color", color_frequencies(segments)),
        ("width", width_frequencies(segments)),
    ):
        path = outdir / f"{name}.frequency.csv"
        write_frequency_csv(table, path)
        written.append(path)

    return written
