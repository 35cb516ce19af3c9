#!/usr/bin/env python3
"""
Frequency Table Tests
"""

import pytest

from ringbit.kernel import Segment
from ringbit.stats import (
    segment_frequencies,
    color_frequencies,
    width_frequencies,
    write_frequency_tables
)


SEGMENTS = [Segment("B", "A"), Segment("A", "C"), Segment("B", "A"), Segment("D", "C")]


def test_frequencies_sorted_by_label():
    assert segment_frequencies(SEGMENTS) == {"AC": 1, "BA": 2, "DC": 1}
    assert list(segment_frequencies(SEGMENTS)) == ["AC", "BA", "DC"]
    assert color_frequencies(SEGMENTS) == {"A": 1, "B": 2, "D": 1}
    assert width_frequencies(SEGMENTS) == {"A": 2, "C": 2}


def test_write_frequency_tables(tmp_path):
    outdir = tmp_path / "stats"

    written = write_frequency_tables(SEGMENTS, outdir)

    assert [p.name for p in written] == [
        "segment.frequency.csv",
        "color.frequency.csv",
        "width.frequency.csv",
    ]
    assert (outdir / "segment.frequency.csv").read_text() == "AC,1\nBA,2\nDC,1\n"
    assert (outdir / "color.frequency.csv").read_text() == "A,1\nB,2\nD,1\n"
    assert (outdir / "width.frequency.csv").read_text() == "A,2\nC,2\n"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
