"""Parsing and conversion of fragment geometry descriptions (FGDL).

FGDL describes how the two reads of a sequenced fragment are laid out into
cell barcodes, UMIs, discarded bases, biological sequence and fixed anchors,
e.g. ``1{b[16]u[12]x:}2{r:}``. This package parses such descriptions and
converts them into the geometry flags of piscem and salmon.
"""

from .exceptions import GeometryError, GeometrySyntaxError, UnsupportedGeometryError
from .models import (
    UNBOUNDED,
    Barcode,
    Discard,
    Fixed,
    FixedLen,
    FragmentGeomDesc,
    GeomLen,
    GeomPiece,
    LenRange,
    NucStr,
    ReadSeq,
    Umi,
    Unbounded,
)
from .parser import FragGeomParser, parse_geometry
from .transducers import GeometryDescription, PiscemGeomDesc, SalmonSeparateGeomDesc

__all__ = [
    "GeometryError",
    "GeometrySyntaxError",
    "UnsupportedGeometryError",
    "UNBOUNDED",
    "Barcode",
    "Discard",
    "Fixed",
    "FixedLen",
    "FragmentGeomDesc",
    "GeomLen",
    "GeomPiece",
    "LenRange",
    "NucStr",
    "ReadSeq",
    "Umi",
    "Unbounded",
    "FragGeomParser",
    "parse_geometry",
    "GeometryDescription",
    "PiscemGeomDesc",
    "SalmonSeparateGeomDesc",
]
