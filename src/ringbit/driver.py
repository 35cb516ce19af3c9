"""
Enumeration Driver

Cross product of nibble ordering (2) × color permutation (24) × width
permutation (24) = 1152 candidates. Each candidate is
encode -> assemble -> evaluate over the same immutable inputs.

Order (frozen): ordering outer, color permutation middle, width
permutation inner. The pooled path sorts results back into this order
before emitting, so both paths emit identical sequences.

Any exception raised for one candidate aborts the whole run.
"""

import os
import sys
from concurrent.futures import ProcessPoolExecutor
from itertools import product
from typing import Callable, Iterator, Optional, Sequence, Tuple

from .core import Receipts, blake3_hash, serialize_rings_be, serialize_segments
from .core.registry import SEGMENT_COUNT
from .kernel import (
    Candidate,
    Permutation,
    Segment,
    assemble_rings,
    encode_segments,
    evaluate_candidate,
    InputLengthMismatch
)

Params = Tuple[int, int, int]
Sink = Callable[[Candidate], None]


def parameter_space(
    n_orderings: int = 2,
    n_color: int = 24,
    n_width: int = 24
) -> Iterator[Params]:
    """Yield (ordering, color_index, width_index) in enumeration order."""
    return product(range(n_orderings), range(n_color), range(n_width))


def evaluate_params(
    segments: Sequence[Segment],
    color_perms: Sequence[Permutation],
    width_perms: Sequence[Permutation],
    params: Params
) -> Candidate:
    """Run one candidate through encoder, assembler and evaluator."""
    ordering, ci, wi = params
    encoded = encode_segments(segments, color_perms[ci], width_perms[wi], ordering)
    rings = assemble_rings(encoded)
    return evaluate_candidate(rings, ordering, ci, wi)


def enumerate_candidates(
    segments: Sequence[Segment],
    color_perms: Sequence[Permutation],
    width_perms: Sequence[Permutation],
    sink: Optional[Sink] = None,
    workers: Optional[int] = None
) -> list[Candidate]:
    """
    Evaluate every point of the parameter space.

    On the sequential path each candidate is handed to the sink as soon
    as it is evaluated, so a failure part-way through leaves the sink
    holding the candidates before it. The pooled path hands candidates
    over only after every worker has finished, in the same order.

    Args:
        segments: Exactly 64 segments.
        color_perms: Color permutations (index = color_index).
        width_perms: Width permutations (index = width_index).
        sink: Called once per candidate, in enumeration order.
        workers: Process pool size. None or 1 runs sequentially.

    Returns:
        list[Candidate]: All candidates in enumeration order.

    Raises:
        InputLengthMismatch: If segments does not hold exactly 64 entries.
        UnknownSymbol: If any segment symbol is missing from a permutation.
    """
    if len(segments) != SEGMENT_COUNT:
        raise InputLengthMismatch("segments", SEGMENT_COUNT, len(segments))

    segments = tuple(Segment(*s) for s in segments)
    space = list(parameter_space(2, len(color_perms), len(width_perms)))
    debug = os.environ.get("DEBUG_ENUMERATE")

    if workers is None or workers <= 1:
        candidates = []
        for params in space:
            candidate = evaluate_params(segments, color_perms, width_perms, params)
            candidates.append(candidate)
            _emit(candidate, sink, debug)
        return candidates

    candidates = _enumerate_pooled(segments, color_perms, width_perms, space, workers)
    for candidate in candidates:
        _emit(candidate, sink, debug)

    return candidates


def _emit(candidate: Candidate, sink: Optional[Sink], debug) -> None:
    if debug:
        print(
            f"  candidate {candidate.params}: zeros={candidate.zeros} "
            f"rings={' '.join(f'{r:04x}' for r in candidate.rings)}",
            file=sys.stderr
        )
    if sink is not None:
        sink(candidate)


def _enumerate_pooled(
    segments: Tuple[Segment, ...],
    color_perms: Sequence[Permutation],
    width_perms: Sequence[Permutation],
    space: list[Params],
    workers: int
) -> list[Candidate]:
    # Read-only mapping proxies do not pickle; ship plain dicts to workers
    color_tables = [dict(p) for p in color_perms]
    width_tables = [dict(p) for p in width_perms]

    # One task per (ordering, color_index): the inner width loop runs in the worker
    chunks = {}
    for params in space:
        chunks.setdefault(params[:2], []).append(params)

    results = []
    with ProcessPoolExecutor(max_workers=workers) as ex:
        futures = [
            ex.submit(_evaluate_chunk, segments, color_tables, width_tables, chunk)
            for chunk in chunks.values()
        ]
        for fut in futures:
            # Re-raises the worker's exception; one failure is fatal to the run
            results.extend(fut.result())

    results.sort(key=lambda c: c.params)
    return results


def _evaluate_chunk(segments, color_tables, width_tables, chunk):
    return [evaluate_params(segments, color_tables, width_tables, params) for params in chunk]


def enumeration_receipts(
    segments: Sequence[Segment],
    candidates: Sequence[Candidate]
) -> Receipts:
    """
    Summarize a run: input fingerprint, candidate count, combined ring
    hash and zero-count extremes.
    """
    receipts = Receipts("enumerate")

    receipts.put("segments.count", len(segments))
    receipts.put("segments.hash", blake3_hash(serialize_segments(segments)))
    receipts.put("candidates.count", len(candidates))

    stream = bytearray()
    for c in candidates:
        stream.extend(bytes(c.params))
        stream.extend(serialize_rings_be(c.rings))
    receipts.put("candidates.rings_hash", blake3_hash(bytes(stream)))

    if candidates:
        receipts.put("zeros.min", min(c.zeros for c in candidates))
        receipts.put("zeros.max", max(c.zeros for c in candidates))
        receipts.put("params.first", list(candidates[0].params))
        receipts.put("params.last", list(candidates[-1].params))

    return receipts
