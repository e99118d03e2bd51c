import orjson as json

from .cigar import Cigar

__all__ = [
    "Serializable",
    "dumps",
    "dumps_indented",
    "cigar_summary",
]


Serializable = dict | list | tuple | str | int | float


def _dumps_default(x):
    if isinstance(x, Cigar):
        return str(x)
    raise TypeError


def dumps(v: Serializable) -> bytes:
    return json.dumps(v, option=json.OPT_NON_STR_KEYS, default=_dumps_default)


def dumps_indented(v: Serializable) -> bytes:
    return json.dumps(v, option=json.OPT_NON_STR_KEYS | json.OPT_INDENT_2, default=_dumps_default)


def cigar_summary(cigar: Cigar) -> dict:
    return {
        "cigar": cigar,
        "runs": cigar.to_ops(),
        "ref_len": cigar.ref_len(),
        "read_len": cigar.read_len(),
        "soft_clip_start": cigar.soft_clip_start(),
        "soft_clip_end": cigar.soft_clip_end(),
        "is_reference": cigar.is_reference(),
    }
