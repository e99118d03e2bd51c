from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Protocol

from .cigar import Cigar, CigarRun
from .constants import OP_MATCH, OP_INSERTION, OP_DELETION

__all__ = [
    "VariantAlleleLike",
    "VariantAllele",
    "cigar_from_variant_allele",
    "cigar_from_variant_alleles",
]


class VariantAlleleLike(Protocol):
    ref: str
    alt: str


@dataclass(frozen=True)
class VariantAllele:
    ref: str
    alt: str


def _difference_run(va: VariantAlleleLike) -> tuple[int, str]:
    # Only called for alleles where ref != alt
    ref_len = len(va.ref)
    alt_len = len(va.alt)
    if ref_len == alt_len:
        return ref_len, OP_MATCH  # substitution
    elif ref_len > alt_len:
        return ref_len - alt_len, OP_DELETION
    return alt_len - ref_len, OP_INSERTION


def cigar_from_variant_allele(va: VariantAlleleLike) -> Cigar:
    if va.ref == va.alt:
        return Cigar.from_run(len(va.ref), OP_MATCH)
    return Cigar.from_run(*_difference_run(va))


def cigar_from_variant_alleles(vas: Iterable[VariantAlleleLike], coalesce: bool = False) -> Cigar:
    """
    Build a CIGAR from a series of variant-allele (ref, alt) pairs, as produced by comparing two aligned sequences.
    Consecutive matching pairs (ref == alt) are accumulated into a single M run. Each differing pair becomes exactly
    one run: M for a substitution, D / I for the length difference otherwise.
    :param vas: Variant alleles, in alignment order.
    :param coalesce: If False (default), pending matches are never merged with a neighbouring substitution M run and
                     consecutive indels are never merged, e.g. AC/AC, G/T, AC/AC gives 2M1M2M. If True, every run is
                     pushed with coalescing, so adjacent runs with equal operations always merge (5M in that example).
    :return: The resulting CIGAR.
    """

    res = Cigar()

    if coalesce:
        for va in vas:
            if va.ref == va.alt:
                res.push(len(va.ref), OP_MATCH)
            else:
                res.push(*_difference_run(va))
        return res

    pending_match: int | None = None

    for va in vas:
        if va.ref != va.alt:
            if pending_match is not None:
                res.runs.append(CigarRun(pending_match, OP_MATCH))
                pending_match = None
            res.runs.append(CigarRun(*_difference_run(va)))
        elif pending_match is not None:
            pending_match += len(va.ref)
        else:
            pending_match = len(va.ref)

    if pending_match is not None:
        res.runs.append(CigarRun(pending_match, OP_MATCH))

    return res
