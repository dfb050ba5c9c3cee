"""Transform FGDL parse trees into geometry models."""

from lark import Token, Transformer

from .exceptions import GeometrySyntaxError
from .models import (
    UNBOUNDED,
    Barcode,
    Discard,
    Fixed,
    FixedLen,
    FragmentGeomDesc,
    LenRange,
    NucStr,
    ReadSeq,
    Umi,
)

PIECE_TYPES = {
    "barcode": Barcode,
    "umi": Umi,
    "discard": Discard,
    "read": ReadSeq,
}

# Maps e.g. "ranged_umi_segment" to ("ranged", Umi)
SEGMENT_RULES = {
    f"{form}_{role}_segment": (form, piece_type)
    for role, piece_type in PIECE_TYPES.items()
    for form in ("fixed", "ranged", "unbounded")
}


class GeometryBuilder(Transformer):
    """Build a ``FragmentGeomDesc`` from a tree produced by ``FragGeomParser``.

    Args:
        text: The parsed description, used for error reporting.
    """

    def __init__(self, text: str = ""):
        super().__init__()
        self.text = text

    def _error(self, message: str, token: Token = None) -> GeometrySyntaxError:
        if token is None:
            return GeometrySyntaxError(message, self.text)
        return GeometrySyntaxError(
            message, self.text, position=token.start_pos, column=token.column
        )

    def len_range(self, children) -> LenRange:
        lo, hi = children
        try:
            return LenRange(int(lo), int(hi))
        except ValueError as e:
            raise self._error(str(e), lo) from e

    def fixed_seq_segment(self, children) -> Fixed:
        (nucstr,) = children
        return Fixed(NucStr(str(nucstr)))

    def __default__(self, data, children, meta):
        if data not in SEGMENT_RULES:
            return super().__default__(data, children, meta)

        form, piece_type = SEGMENT_RULES[data]
        if form == "fixed":
            (length,) = children
            try:
                return piece_type(FixedLen(int(length)))
            except ValueError as e:
                raise self._error(str(e), length) from e
        if form == "ranged":
            (length_range,) = children
            return piece_type(length_range)
        return piece_type(UNBOUNDED)

    def read_desc(self, children) -> tuple:
        return tuple(children)

    def read_1_desc(self, children):
        (pieces,) = children
        return 1, pieces

    def read_2_desc(self, children):
        (pieces,) = children
        return 2, pieces

    def frag_desc(self, children) -> FragmentGeomDesc:
        reads = dict(children)
        for read_num in (1, 2):
            if read_num not in reads:
                raise self._error(f"missing description for read {read_num}")
        return FragmentGeomDesc(read1_desc=reads[1], read2_desc=reads[2])
