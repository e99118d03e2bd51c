import logging

from dataclasses import dataclass

from .logger import log_levels

__all__ = ["CigarParams"]


@dataclass(frozen=True)
class CigarParams:
    lenient: bool = False  # Use the legacy-compatible CIGAR scanner instead of raising on malformed input
    coalesce: bool = False  # Always merge adjacent equal-operation runs when building from variant alleles
    indent_json: bool = False
    log_level: int = logging.WARNING

    @classmethod
    def from_args(cls, p_args):
        return cls(
            lenient=getattr(p_args, "lenient", False),
            coalesce=getattr(p_args, "coalesce", False),
            indent_json=getattr(p_args, "indent_json", False),
            log_level=log_levels[p_args.log_level],
        )
