"""Abstract base class for downstream tool geometry descriptions."""

from abc import ABC, abstractmethod
from typing import Sequence

from ..models import FragmentGeomDesc, GeomPiece


class GeometryDescription(ABC):
    """
    Base class for geometry descriptions understood by a downstream tool.

    Implementations are derived from a parsed ``FragmentGeomDesc`` and know
    how to add themselves to the command line of the tool that consumes them.
    """

    @classmethod
    @abstractmethod
    def from_geom_pieces(
        cls,
        geom_pieces_r1: Sequence[GeomPiece],
        geom_pieces_r2: Sequence[GeomPiece],
    ) -> "GeometryDescription":
        """
        Build the description from the pieces of read 1 and read 2.

        Args:
            geom_pieces_r1: Pieces of read 1, in left-to-right order.
            geom_pieces_r2: Pieces of read 2, in left-to-right order.
        """
        pass

    @classmethod
    def from_fragment_geom(cls, frag_desc: FragmentGeomDesc) -> "GeometryDescription":
        """Build the description for a parsed fragment geometry."""
        return cls.from_geom_pieces(frag_desc.read1_desc, frag_desc.read2_desc)

    @abstractmethod
    def to_args(self) -> list[str]:
        """
        Return the command-line flags and values for this description.

        Returns:
            Flat list such as ``["--geometry", "1{...}2{...}"]``.
        """
        pass

    def append(self, cmd: list[str]) -> list[str]:
        """Append this description's flags to ``cmd`` and return it."""
        cmd.extend(self.to_args())
        return cmd
