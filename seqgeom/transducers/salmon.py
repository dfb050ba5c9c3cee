"""Geometry description in salmon's separate barcode/UMI/read format.

salmon alevin takes one flag per role, each listing the 1-based inclusive
intervals that role occupies in read 1 and read 2, e.g. ``1[1-16]`` for a
16 base barcode at the start of read 1, or ``2[1-end]`` for a read that runs
to the end of read 2.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from ..exceptions import UnsupportedGeometryError
from ..models import Barcode, FixedLen, GeomPiece, ReadSeq, Umi
from .base import GeometryDescription

logger = logging.getLogger(__name__)

INTERVAL_ROLES = {
    Barcode: "barcode",
    Umi: "umi",
    ReadSeq: "read",
}


@dataclass(frozen=True)
class GeomInterval:
    """A 1-based inclusive interval; ``end`` is None when open to the read's end."""

    start: int
    end: Optional[int] = None

    def __str__(self) -> str:
        end = "end" if self.end is None else self.end
        return f"{self.start}-{end}"


def collect_intervals(
    geom_pieces: Sequence[GeomPiece], read_num: int
) -> dict[str, list[GeomInterval]]:
    """Compute the intervals occupied by each role within one read.

    Walks the pieces left to right keeping a running offset. Fixed length
    pieces advance it; an unbounded piece closes the read.

    Args:
        geom_pieces: Pieces of the read, in order.
        read_num: Read number, used for error reporting.

    Returns:
        Mapping of ``"barcode"``, ``"umi"`` and ``"read"`` to their intervals.

    Raises:
        UnsupportedGeometryError: On an anchor, a ranged piece, or any piece
            following an unbounded one.
    """
    intervals = {role: [] for role in INTERVAL_ROLES.values()}
    offset = 0
    closed = False

    for piece in geom_pieces:
        if closed:
            raise UnsupportedGeometryError(
                piece, read_num, "pieces after an unbounded piece cannot be located"
            )
        if piece.is_complex():
            raise UnsupportedGeometryError(
                piece,
                read_num,
                "fixed sequence anchors and ranged lengths are not supported "
                "in the salmon separate description format",
            )

        role = INTERVAL_ROLES.get(type(piece))
        if isinstance(piece.length, FixedLen):
            n = piece.length.n
            if role is not None:
                intervals[role].append(GeomInterval(offset + 1, offset + n))
            offset += n
        else:
            if role is not None:
                intervals[role].append(GeomInterval(offset + 1))
            closed = True

    return intervals


def format_intervals(intervals: Sequence[GeomInterval]) -> str:
    return "[" + ",".join(str(interval) for interval in intervals) + "]"


@dataclass(frozen=True)
class SalmonSeparateGeomDesc(GeometryDescription):
    """salmon compatible ``--bc-geometry``, ``--umi-geometry`` and ``--read-geometry`` values."""

    barcode_desc: str
    umi_desc: str
    read_desc: str

    @classmethod
    def from_geom_pieces(
        cls,
        geom_pieces_r1: Sequence[GeomPiece],
        geom_pieces_r2: Sequence[GeomPiece],
    ) -> "SalmonSeparateGeomDesc":
        """Build the description, raising ``UnsupportedGeometryError`` for complex geometries."""
        reps = {role: "" for role in INTERVAL_ROLES.values()}
        for read_num, pieces in ((1, geom_pieces_r1), (2, geom_pieces_r2)):
            for role, intervals in collect_intervals(pieces, read_num).items():
                # Reads that contribute no interval are left out entirely
                if intervals:
                    reps[role] += f"{read_num}{format_intervals(intervals)}"

        desc = cls(barcode_desc=reps["barcode"], umi_desc=reps["umi"], read_desc=reps["read"])
        logger.debug(f"Built salmon geometry {desc}")
        return desc

    def to_args(self) -> list[str]:
        return [
            "--read-geometry",
            self.read_desc,
            "--bc-geometry",
            self.barcode_desc,
            "--umi-geometry",
            self.umi_desc,
        ]
