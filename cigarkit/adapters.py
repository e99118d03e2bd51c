from __future__ import annotations

import numpy as np

from numpy.typing import NDArray
from pysam import AlignedSegment
from typing import TYPE_CHECKING, Iterable, Union

from .cigar import Cigar
from .constants import BAM_CIGAR_OPS, BAM_OP_TO_CODE, OP_MATCH, OP_SEQ_MATCH
from .exceptions import CigarConversionError

if TYPE_CHECKING:
    from parasail import Cigar as ParasailCigar

__all__ = [
    "decode_cigar_np",
    "from_cigartuples",
    "to_cigartuples",
    "from_aligned_segment",
    "set_segment_cigar",
    "from_encoded",
    "to_encoded",
    "from_parasail",
]


EncodedCigar = Union[NDArray[np.uint32], Iterable[int]]

BAM_MAX_OP_LENGTH = (1 << 28) - 1


def _op_char(code: int) -> str:
    if not 0 <= code < len(BAM_CIGAR_OPS):
        raise CigarConversionError(f"unknown BAM CIGAR operation code: {code}")
    return BAM_CIGAR_OPS[code]


def _op_code(op: str) -> int:
    if (code := BAM_OP_TO_CODE.get(op)) is None:
        raise CigarConversionError(f"CIGAR operation '{op}' has no BAM operation code")
    return code


def _op_length(length: int) -> int:
    # BAM stores run lengths in the upper 28 bits of each uint32
    if length > BAM_MAX_OP_LENGTH:
        raise CigarConversionError(f"CIGAR run length {length} does not fit in a BAM-encoded operation")
    return length


def decode_cigar_np(encoded_cigar: NDArray[np.uint32]) -> NDArray[np.uint32]:
    # BAM encoding: length << 4 | op; result rows are (op, length)
    return np.stack((np.bitwise_and(encoded_cigar, 15), np.right_shift(encoded_cigar, 4)), axis=1)


# pysam ----------------------------------------------------------------------------------------------------------------

def from_cigartuples(cigartuples: Iterable[tuple[int, int]]) -> Cigar:
    """
    Build a CIGAR from pysam-style cigartuples.
    :param cigartuples: (op code, length) pairs, e.g. from AlignedSegment.cigartuples
    :return: The equivalent CIGAR.
    """
    return Cigar.from_ops((length, _op_char(op)) for op, length in cigartuples)


def to_cigartuples(cigar: Cigar) -> list[tuple[int, int]]:
    return [(_op_code(r.op), r.length) for r in cigar]


def from_aligned_segment(segment: AlignedSegment) -> Cigar:
    # cigartuples is None for unmapped reads / reads without a CIGAR
    return from_cigartuples(segment.cigartuples or ())


def set_segment_cigar(segment: AlignedSegment, cigar: Cigar) -> None:
    """
    Write a CIGAR onto a pysam aligned segment via mutation.
    :param segment: AlignedSegment instance to update. This object is mutated.
    :param cigar: CIGAR to write. An empty CIGAR clears the segment's CIGAR.
    """
    segment.cigartuples = to_cigartuples(cigar) if cigar else None


# BAM-encoded arrays ---------------------------------------------------------------------------------------------------

def from_encoded(encoded_cigar: EncodedCigar) -> Cigar:
    decoded = decode_cigar_np(np.asarray(encoded_cigar, dtype=np.uint32).reshape(-1))
    return Cigar.from_ops((int(length), _op_char(int(op))) for op, length in decoded)


def to_encoded(cigar: Cigar) -> NDArray[np.uint32]:
    lengths = np.fromiter((_op_length(r.length) for r in cigar), dtype=np.uint32, count=len(cigar))
    codes = np.fromiter((_op_code(r.op) for r in cigar), dtype=np.uint32, count=len(cigar))
    return np.bitwise_or(np.left_shift(lengths, 4), codes)


# parasail -------------------------------------------------------------------------------------------------------------

def from_parasail(cigar: ParasailCigar, seq_match_as_m: bool = True) -> Cigar:
    """
    Build a CIGAR from the traceback CIGAR of a parasail alignment result (i.e. result.cigar).
    :param cigar: parasail Cigar object; its .seq is an array of BAM-encoded operations.
    :param seq_match_as_m: parasail reports matches as '=' runs. If True, these are rewritten as M runs (merging with
                           any neighbouring M run), so that reference/read lengths count them.
    :return: The equivalent CIGAR.
    """

    res = from_encoded(cigar.seq)
    if not seq_match_as_m:
        return res

    converted = Cigar()
    for r in res:
        converted.push(r.length, OP_MATCH if r.op == OP_SEQ_MATCH else r.op)
    return converted
