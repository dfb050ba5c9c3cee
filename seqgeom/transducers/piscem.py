"""Geometry description in the format expected by piscem."""

from dataclasses import dataclass
from typing import Sequence

from ..models import GeomPiece, render_read
from .base import GeometryDescription


@dataclass(frozen=True)
class PiscemGeomDesc(GeometryDescription):
    """A piscem compatible ``--geometry`` value, kept per read."""

    read1_desc: str
    read2_desc: str

    @classmethod
    def from_geom_pieces(
        cls,
        geom_pieces_r1: Sequence[GeomPiece],
        geom_pieces_r2: Sequence[GeomPiece],
    ) -> "PiscemGeomDesc":
        return cls(
            read1_desc=render_read(geom_pieces_r1),
            read2_desc=render_read(geom_pieces_r2),
        )

    @property
    def geometry(self) -> str:
        """The full ``1{...}2{...}`` value."""
        return f"1{self.read1_desc}2{self.read2_desc}"

    def to_args(self) -> list[str]:
        return ["--geometry", self.geometry]
