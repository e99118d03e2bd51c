import numpy as np
import parasail
import pysam
import pytest

from cigarkit.adapters import (
    decode_cigar_np,
    from_cigartuples,
    to_cigartuples,
    from_aligned_segment,
    set_segment_cigar,
    from_encoded,
    to_encoded,
    from_parasail,
)
from cigarkit.cigar import Cigar
from cigarkit.constants import CIGAR_OP_MATCH, CIGAR_OP_INSERTION, CIGAR_OP_DELETION, CIGAR_OP_SOFT_CLIPPED
from cigarkit.exceptions import CigarConversionError


def test_cigartuples():
    assert str(from_cigartuples([
        (CIGAR_OP_SOFT_CLIPPED, 5), (CIGAR_OP_MATCH, 10), (CIGAR_OP_SOFT_CLIPPED, 5)])) == "5S10M5S"
    assert to_cigartuples(Cigar.from_string("10M2I3D5M")) == [
        (CIGAR_OP_MATCH, 10), (CIGAR_OP_INSERTION, 2), (CIGAR_OP_DELETION, 3), (CIGAR_OP_MATCH, 5)]
    assert to_cigartuples(Cigar.from_string("3=1X")) == [(7, 3), (8, 1)]
    assert not from_cigartuples([])


def test_cigartuples_invalid():
    with pytest.raises(CigarConversionError):
        to_cigartuples(Cigar.from_run(3, "Z"))
    with pytest.raises(CigarConversionError):
        from_cigartuples([(12, 3)])


def test_aligned_segment():
    seg = pysam.AlignedSegment()
    assert not from_aligned_segment(seg)

    seg.cigarstring = "5S10M5S"
    c = from_aligned_segment(seg)
    assert c == Cigar.from_string("5S10M5S")
    assert c.soft_clip_start() == 5

    set_segment_cigar(seg, Cigar.from_string("3M1I4M"))
    assert seg.cigarstring == "3M1I4M"
    assert seg.cigartuples == [(0, 3), (1, 1), (0, 4)]


def test_decode_cigar_np():
    decoded = decode_cigar_np(np.array([160, 33], dtype=np.uint32))
    assert decoded.tolist() == [[0, 10], [1, 2]]


def test_encoded():
    c = Cigar.from_string("10M2I")
    encoded = to_encoded(c)
    assert encoded.dtype == np.uint32
    assert encoded.tolist() == [160, 33]
    assert from_encoded(encoded) == c
    assert from_encoded([160, 33]) == c
    assert not from_encoded([])
    assert to_encoded(Cigar()).tolist() == []


def test_parasail():
    res = parasail.nw_trace_scan_16("ACGTACGT", "ACGTACGT", 10, 1, parasail.dnafull)

    c = from_parasail(res.cigar)
    assert str(c) == "8M"
    assert c.is_reference()
    assert c.ref_len() == 8

    assert str(from_parasail(res.cigar, seq_match_as_m=False)) == "8="


def test_encoded_length_limit():
    max_len = (1 << 28) - 1
    c = Cigar.from_run(max_len, "M")
    assert from_encoded(to_encoded(c)) == c

    with pytest.raises(CigarConversionError):
        to_encoded(Cigar.from_run(1 << 28, "M"))
    with pytest.raises(CigarConversionError):
        to_encoded(Cigar.from_ops([(5, "S"), (2 ** 32 + 3, "M")]))
