from __future__ import annotations

import re

from typing import TYPE_CHECKING

from .exceptions import CigarParseError

if TYPE_CHECKING:
    from logging import Logger

__all__ = [
    "RE_CIGAR_RUN",
    "parse_cigar_runs",
    "parse_cigar_runs_lenient",
]

# patterns
#  - ASCII digits only; the operation is exactly one non-digit character.
RE_CIGAR_RUN = re.compile(r"([0-9]+)([^0-9])")

_DIGITS = frozenset("0123456789")


def parse_cigar_runs(cigar_str: str) -> list[tuple[int, str]]:
    """
    Strictly parse a CIGAR string into (length, operation) pairs in a single pass.
    :param cigar_str: CIGAR text, e.g. 10M2I3D5M
    :return: List of (length, operation) pairs, in order.
    """

    if not cigar_str:
        raise CigarParseError("empty", cigar_str, 0)

    runs: list[tuple[int, str]] = []
    pos: int = 0
    n: int = len(cigar_str)

    while pos < n:
        if (m := RE_CIGAR_RUN.match(cigar_str, pos)) is None:
            if cigar_str[pos] in _DIGITS:
                # only digits remain - the last run never got an operation
                raise CigarParseError("op_expected", cigar_str, n)
            raise CigarParseError("digit_expected", cigar_str, pos)

        runs.append((int(m.group(1)), m.group(2)))
        pos = m.end()

    return runs


def parse_cigar_runs_lenient(cigar_str: str, logger_: Logger | None = None) -> list[tuple[int, str]]:
    """
    Legacy-compatible CIGAR scanner which never raises. Malformed input yields an empty or truncated result:
     - a run with operation characters but no digits before it gets a length of 0;
     - if several non-digit characters follow a length, only the first is used as the operation;
     - trailing digits without an operation (or a trailing operation without digits) are dropped.
    :param cigar_str: CIGAR text to scan.
    :param logger_: Optional logger to report recovered malformations to, at debug level.
    :return: List of (length, operation) pairs, in order.
    """

    runs: list[tuple[int, str]] = []
    number: str = ""
    op: str = ""

    def _emit():
        if logger_ is not None:
            if not number:
                logger_.debug("CIGAR '%s': operation '%s' has no length; using 0", cigar_str, op[0])
            if len(op) > 1:
                logger_.debug("CIGAR '%s': ignoring extra operation characters in '%s'", cigar_str, op)
        runs.append((int(number or "0"), op[0]))

    for c in cigar_str:
        if c in _DIGITS:
            if op:
                # a new length starts, so the previous token is complete
                _emit()
                number = ""
                op = ""
            number += c
        else:
            op += c

    if number and op:
        _emit()
    elif (number or op) and logger_ is not None:
        logger_.debug("CIGAR '%s': dropping incomplete trailing token '%s%s'", cigar_str, number, op)

    return runs
