"""
Candidate Export

JSON records for candidates. Field names follow the matrices.json
layout: zeros, ones, ordering, color_encoding, width_encoding, plus the
raw ring values and the 16×16 bit matrix.
"""

import json
from pathlib import Path
from typing import Sequence, TextIO, Union

from .kernel import Candidate, ring_bits


def candidate_to_json(candidate: Candidate) -> dict:
    return {
        "zeros": candidate.zeros,
        "ones": candidate.ones,
        "ordering": candidate.ordering,
        "color_encoding": candidate.color_index,
        "width_encoding": candidate.width_index,
        "rings": list(candidate.rings),
        "bits": ring_bits(candidate.rings),
    }


def dump_candidates(candidates: Sequence[Candidate], f: TextIO) -> None:
    """Write all candidates as one JSON array, in the given order."""
    json.dump([candidate_to_json(c) for c in candidates], f)


def write_candidates_json(candidates: Sequence[Candidate], path: Union[str, Path]) -> None:
    with open(path, 'w') as f:
        dump_candidates(candidates, f)
