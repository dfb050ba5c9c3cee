"""Data models for fragment geometry descriptions.

A fragment is described read by read as an ordered list of geometry pieces.
Each piece has a role (barcode, UMI, discarded bases, biological read
sequence or fixed anchor) and, except for anchors, a length specifier.
"""

import re
from dataclasses import dataclass, field
from typing import ClassVar, Iterator, Union

NUCLEOTIDES = re.compile(r"[ACGT]+")


# Length specifiers


@dataclass(frozen=True)
class FixedLen:
    """Exactly ``n`` bases."""

    n: int

    def __post_init__(self):
        if self.n < 1:
            raise ValueError(f"Fixed length must be at least 1, got {self.n}")

    def __str__(self) -> str:
        return f"[{self.n}]"


@dataclass(frozen=True)
class LenRange:
    """Between ``lo`` and ``hi`` bases, inclusive."""

    lo: int
    hi: int

    def __post_init__(self):
        if self.lo < 1:
            raise ValueError(f"Length range must start at 1 or more, got {self.lo}")
        if self.lo > self.hi:
            raise ValueError(f"Length range lower bound {self.lo} exceeds upper bound {self.hi}")

    def __str__(self) -> str:
        return f"[{self.lo}-{self.hi}]"


@dataclass(frozen=True)
class Unbounded:
    """All remaining bases of the read (at least one)."""

    def __str__(self) -> str:
        return ":"


GeomLen = Union[FixedLen, LenRange, Unbounded]

UNBOUNDED = Unbounded()


@dataclass(frozen=True)
class NucStr:
    """Literal nucleotide content of a fixed sequence anchor."""

    seq: str

    def __post_init__(self):
        if not NUCLEOTIDES.fullmatch(self.seq):
            raise ValueError(f"Anchor sequence must be a non-empty ACGT string, got {self.seq!r}")

    def __len__(self) -> int:
        return len(self.seq)

    def __str__(self) -> str:
        return self.seq


# Geometry pieces


@dataclass(frozen=True)
class GeomPiece:
    """Base class of the five geometry piece types.

    Subclasses set ``code`` to the role letter used in FGDL and expose a
    ``length`` (a ``GeomLen``).
    """

    code: ClassVar[str] = ""

    def is_fixed_len(self) -> bool:
        """True for pieces of exactly known length (including anchors)."""
        return isinstance(self.length, FixedLen)

    def is_bounded(self) -> bool:
        """True unless the piece runs to the end of the read."""
        return not isinstance(self.length, Unbounded)

    def is_complex(self) -> bool:
        """True for anchors and ranged pieces.

        The boundaries of a complex piece cannot be found from a running
        fixed offset alone.
        """
        return isinstance(self.length, LenRange)

    def __str__(self) -> str:
        return f"{self.code}{self.length}"


@dataclass(frozen=True)
class _LengthPiece(GeomPiece):
    length: GeomLen


@dataclass(frozen=True)
class Barcode(_LengthPiece):
    """A cellular barcode."""

    code: ClassVar[str] = "b"


@dataclass(frozen=True)
class Umi(_LengthPiece):
    """A unique molecular identifier."""

    code: ClassVar[str] = "u"


@dataclass(frozen=True)
class Discard(_LengthPiece):
    """Bases that are ignored."""

    code: ClassVar[str] = "x"


@dataclass(frozen=True)
class ReadSeq(_LengthPiece):
    """Biological read sequence."""

    code: ClassVar[str] = "r"


@dataclass(frozen=True)
class Fixed(GeomPiece):
    """A fixed sequence anchor."""

    code: ClassVar[str] = "f"

    seq: NucStr

    @property
    def length(self) -> GeomLen:
        return FixedLen(len(self.seq))

    def is_complex(self) -> bool:
        return True

    def __str__(self) -> str:
        return f"f[{self.seq}]"


# Fragment geometry


def render_read(pieces) -> str:
    """Render the pieces of one read in canonical FGDL, wrapped in braces."""
    return "{" + "".join(str(piece) for piece in pieces) + "}"


@dataclass(frozen=True)
class FragmentGeomDesc:
    """Parsed geometry of a two-read fragment.

    Attributes:
        read1_desc: Pieces of read 1, in left-to-right order.
        read2_desc: Pieces of read 2, in left-to-right order.
    """

    read1_desc: tuple[GeomPiece, ...] = field(default_factory=tuple)
    read2_desc: tuple[GeomPiece, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # Accept any sequence but always store tuples
        object.__setattr__(self, "read1_desc", tuple(self.read1_desc))
        object.__setattr__(self, "read2_desc", tuple(self.read2_desc))

    @classmethod
    def from_str(cls, text: str) -> "FragmentGeomDesc":
        """Parse an FGDL description.

        Raises:
            GeometrySyntaxError: If ``text`` is not a valid description.
        """
        from .parser import parse_geometry

        return parse_geometry(text)

    def reads(self) -> tuple[tuple[int, tuple[GeomPiece, ...]], ...]:
        """Return ``(read_num, pieces)`` for read 1 and read 2."""
        return ((1, self.read1_desc), (2, self.read2_desc))

    def pieces(self) -> Iterator[tuple[int, GeomPiece]]:
        """Yield ``(read_num, piece)`` for every piece of both reads, in order."""
        for read_num, pieces in self.reads():
            for piece in pieces:
                yield read_num, piece

    def is_complex_geometry(self) -> bool:
        """True if any piece of either read is complex."""
        return any(piece.is_complex() for _, piece in self.pieces())

    def is_simple_geometry(self) -> bool:
        """True if the geometry holds only fixed length and unbounded pieces."""
        return not self.is_complex_geometry()

    def to_dict(self) -> dict:
        """Convert to a JSON friendly dictionary."""
        return {
            "geometry": str(self),
            "read1": [str(piece) for piece in self.read1_desc],
            "read2": [str(piece) for piece in self.read2_desc],
            "complex": self.is_complex_geometry(),
        }

    def __str__(self) -> str:
        return f"1{render_read(self.read1_desc)}2{render_read(self.read2_desc)}"
