__all__ = [
    "CIGAR_OP_MATCH",
    "CIGAR_OP_INSERTION",
    "CIGAR_OP_DELETION",
    "CIGAR_OP_SKIPPED",
    "CIGAR_OP_SOFT_CLIPPED",
    "CIGAR_OP_HARD_CLIPPED",
    "CIGAR_OP_PADDING",
    "CIGAR_OP_SEQ_MATCH",
    "CIGAR_OP_SEQ_MISMATCH",
    "CIGAR_OP_BACK",

    "OP_MATCH",
    "OP_INSERTION",
    "OP_DELETION",
    "OP_SOFT_CLIP",
    "OP_MISMATCH",
    "OP_SEQ_MATCH",
    "OP_UNSET",

    "BAM_CIGAR_OPS",
    "BAM_OP_TO_CODE",

    "REF_CONSUMING_OPS",
    "READ_CONSUMING_OPS",
]


# Integer operation codes, as stored in BAM records and reported by pysam / parasail
CIGAR_OP_MATCH = 0  # M
CIGAR_OP_INSERTION = 1  # I
CIGAR_OP_DELETION = 2  # D
CIGAR_OP_SKIPPED = 3  # N
CIGAR_OP_SOFT_CLIPPED = 4  # S
CIGAR_OP_HARD_CLIPPED = 5  # H
CIGAR_OP_PADDING = 6  # P
CIGAR_OP_SEQ_MATCH = 7  # =
CIGAR_OP_SEQ_MISMATCH = 8  # X
CIGAR_OP_BACK = 9  # B

# Character operation codes
OP_MATCH = "M"
OP_INSERTION = "I"
OP_DELETION = "D"
OP_SOFT_CLIP = "S"
OP_MISMATCH = "X"
OP_SEQ_MATCH = "="
OP_UNSET = "\0"  # operation of a cleared / default-constructed run

# BAM_CIGAR_OPS[code] gives the character for an integer op code
BAM_CIGAR_OPS = "MIDNSHP=XB"
BAM_OP_TO_CODE: dict[str, int] = {op: code for code, op in enumerate(BAM_CIGAR_OPS)}

# Only the classic operation set has length semantics; anything else consumes nothing.
REF_CONSUMING_OPS = frozenset((OP_MATCH, OP_DELETION, OP_MISMATCH))
READ_CONSUMING_OPS = frozenset((OP_MATCH, OP_INSERTION, OP_MISMATCH, OP_SOFT_CLIP))
