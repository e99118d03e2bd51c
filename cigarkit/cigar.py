from __future__ import annotations

import itertools

from dataclasses import dataclass
from numbers import Integral
from typing import TYPE_CHECKING, Generator, Iterable, Iterator, Union

from .constants import (
    OP_MATCH,
    OP_INSERTION,
    OP_DELETION,
    OP_SOFT_CLIP,
    OP_MISMATCH,
    OP_UNSET,
    REF_CONSUMING_OPS,
    READ_CONSUMING_OPS,
)
from .exceptions import InvalidRunError
from .parse import parse_cigar_runs, parse_cigar_runs_lenient

if TYPE_CHECKING:
    from logging import Logger

__all__ = [
    "CigarRun",
    "Cigar",
    "join",
    "iter_aligned_pairs",
]


@dataclass
class CigarRun:
    length: int = 0
    op: str = OP_UNSET

    def __post_init__(self):
        if not isinstance(self.length, Integral) or isinstance(self.length, bool):
            raise InvalidRunError(f"CIGAR run length must be an integer (got {self.length!r})")
        self.length = int(self.length)  # e.g. numpy integers
        if self.length < 0:
            raise InvalidRunError(f"CIGAR run length must be non-negative (got {self.length})")
        if not isinstance(self.op, str) or len(self.op) != 1:
            raise InvalidRunError(f"CIGAR run operation must be a single character (got {self.op!r})")

    def __str__(self) -> str:
        return f"{self.length}{self.op}"

    def clear(self) -> None:
        self.length = 0
        self.op = OP_UNSET

    def is_insertion(self) -> bool:
        return self.op == OP_INSERTION

    def is_deletion(self) -> bool:
        return self.op == OP_DELETION

    def is_softclip(self) -> bool:
        return self.op == OP_SOFT_CLIP

    def is_indel(self) -> bool:
        return self.is_insertion() or self.is_deletion()

    def consumes_ref(self) -> bool:
        return self.op in REF_CONSUMING_OPS

    def consumes_read(self) -> bool:
        return self.op in READ_CONSUMING_OPS

    def copy(self) -> CigarRun:
        return CigarRun(self.length, self.op)


class Cigar:
    """
    An ordered sequence of CIGAR runs describing one alignment path, from read start to read end.
    Runs are owned by value: anything passed in is copied, so Cigars never share CigarRun objects.
    """

    __slots__ = ("runs",)

    def __init__(self, runs: Iterable[CigarRun] = ()):
        self.runs: list[CigarRun] = [r.copy() for r in runs]

    # construction ---------------------------------------------------------------------------------

    @classmethod
    def from_string(cls, cigar_str: str, lenient: bool = False, logger_: Logger | None = None) -> Cigar:
        """
        Parse a CIGAR string.
        :param cigar_str: CIGAR text, e.g. 10M2I3D5M
        :param lenient: If True, use the legacy-compatible scanner, which returns an empty or truncated CIGAR for
                        malformed input instead of raising a CigarParseError.
        :param logger_: Logger for reporting recovered malformations in lenient mode.
        :return: The parsed CIGAR.
        """
        runs = parse_cigar_runs_lenient(cigar_str, logger_) if lenient else parse_cigar_runs(cigar_str)
        return cls.from_ops(runs)

    @classmethod
    def from_run(cls, length: int, op: str) -> Cigar:
        return cls((CigarRun(length, op),))

    @classmethod
    def from_ops(cls, ops: Iterable[tuple[int, str]]) -> Cigar:
        return cls(CigarRun(length, op) for length, op in ops)

    # sequence protocol ----------------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self.runs)

    def __iter__(self) -> Iterator[CigarRun]:
        return iter(self.runs)

    def __getitem__(self, item: int) -> CigarRun:
        return self.runs[item]

    def __bool__(self) -> bool:
        return bool(self.runs)

    def __eq__(self, other) -> bool:
        if isinstance(other, Cigar):
            return self.runs == other.runs
        return NotImplemented

    def __str__(self) -> str:
        return "".join(map(str, self.runs))

    def __repr__(self) -> str:
        return f"Cigar('{self}')"

    def copy(self) -> Cigar:
        return Cigar(self.runs)

    # derived metrics ------------------------------------------------------------------------------

    def ref_len(self) -> int:
        """Number of reference positions covered by the alignment (M, D and X runs)."""
        return sum(r.length for r in self.runs if r.op in REF_CONSUMING_OPS)

    def read_len(self) -> int:
        """Number of read positions covered, including soft-clipped ones (M, I, X and S runs)."""
        return sum(r.length for r in self.runs if r.op in READ_CONSUMING_OPS)

    def soft_clip_start(self) -> int:
        if self.runs and self.runs[0].is_softclip():
            return self.runs[0].length
        return 0

    def soft_clip_end(self) -> int:
        if self.runs and self.runs[-1].is_softclip():
            return self.runs[-1].length
        return 0

    def is_reference(self) -> bool:
        return len(self.runs) == 1 and self.runs[0].op == OP_MATCH

    # mutation -------------------------------------------------------------------------------------

    def append(self, other: Cigar) -> None:
        """
        Append another CIGAR onto the end of this one, merging runs across the boundary while their operations
        match the current last run. A single zero-length run is treated as "nothing to append".
        :param other: CIGAR to append. It is not modified.
        """

        if len(other) == 1 and other[0].length == 0:
            return

        if not self.runs:
            self.runs = [r.copy() for r in other]
            return

        # snapshot first, since appending a CIGAR to itself grows the run being read
        other_runs = [r.copy() for r in other] if other is self else other.runs
        i = 0
        n = len(other_runs)
        last = self.runs[-1]

        while i < n and last.op == other_runs[i].op:
            last.length += other_runs[i].length
            i += 1

        self.runs.extend(r.copy() for r in other_runs[i:])

    def push(self, length: int, op: str) -> None:
        """
        Add a single run to the end, always merging it into the last run if the operations are equal.
        """
        run = CigarRun(length, op)
        if self.runs and self.runs[-1].op == op:
            self.runs[-1].length += run.length
            return
        self.runs.append(run)

    def coalesced(self) -> Cigar:
        res = Cigar()
        for r in self.runs:
            res.push(r.length, r.op)
        return res

    # serialization --------------------------------------------------------------------------------

    def to_ops(self) -> list[tuple[int, str]]:
        return [(r.length, r.op) for r in self.runs]


def join(cigars: Iterable[Cigar]) -> Cigar:
    """
    Join a series of partial alignments into one continuous alignment path, in order.
    :param cigars: CIGARs to join; none of them are modified.
    :return: A new CIGAR.
    """
    res = Cigar()
    for c in cigars:
        res.append(c)
    return res


def iter_aligned_pairs(
    cigar: Cigar,
    query_start: int = 0,
    ref_start: int = 0,
) -> Generator[tuple[Union[int, None], Union[int, None]], None, None]:
    qi = itertools.count(start=query_start)
    di = itertools.count(start=ref_start)

    for run in cigar:
        rc = range(run.length)
        op = run.op

        if op in (OP_MATCH, OP_MISMATCH):
            yield from ((next(qi), next(di)) for _ in rc)
        elif op in (OP_INSERTION, OP_SOFT_CLIP):
            yield from ((next(qi), None) for _ in rc)
        elif op == OP_DELETION:
            yield from ((None, next(di)) for _ in rc)
        # anything else consumes neither sequence
