from logging import Logger
from typing import Literal

__all__ = [
    "CigarError",
    "CigarParseError",
    "InvalidRunError",
    "CigarConversionError",
    "ParamError",
    "InputError",
]


ParseErrorKind = Literal["empty", "digit_expected", "op_expected"]

_PARSE_HINTS: dict[str, str] = {
    "empty": "CIGAR strings must contain at least one <length><operation> run, e.g. 10M",
    "digit_expected": "each CIGAR run must start with a decimal length, e.g. 10M2I, not M10 or 10MM",
    "op_expected": "each CIGAR run length must be followed by a single operation character, e.g. 10M",
}


class CigarError(Exception):
    """Base class for all CIGAR-related exceptions."""

    hint: str = ""

    def log_error(self, logger: Logger) -> None:
        logger.critical(str(self))
        if self.hint:
            logger.critical(self.hint)


class CigarParseError(CigarError, ValueError):
    def __init__(self, kind: ParseErrorKind, cigar_str: str, pos: int):
        self.kind: ParseErrorKind = kind
        self.cigar_str: str = cigar_str
        self.pos: int = pos
        self.hint = _PARSE_HINTS[kind]

        if kind == "empty":
            msg = "cannot parse empty CIGAR string"
        else:
            what = "digit" if kind == "digit_expected" else "operation"
            msg = f"invalid CIGAR string '{cigar_str}': {what} expected at position {pos}"

        super().__init__(msg)


class InvalidRunError(CigarError, ValueError):
    """Raised when a CIGAR run is given a negative length or a non-single-character operation."""
    pass


class CigarConversionError(CigarError, ValueError):
    """Raised when a CIGAR cannot be expressed in (or read from) an external operation format."""
    pass


class ParamError(Exception):
    pass


class InputError(Exception):
    pass
