"""Geometry descriptions for downstream tools."""

from .base import GeometryDescription
from .piscem import PiscemGeomDesc
from .salmon import GeomInterval, SalmonSeparateGeomDesc

__all__ = ["GeometryDescription", "PiscemGeomDesc", "SalmonSeparateGeomDesc", "GeomInterval"]
