"""Errors raised while parsing and converting fragment geometries."""

from typing import Optional, Sequence


class GeometryError(ValueError):
    """Base class for all fragment geometry errors."""


class GeometrySyntaxError(GeometryError):
    """The geometry description does not conform to the FGDL grammar.

    Attributes:
        text: The description that failed to parse.
        position: 0-based offset of the offending character, or None when the
            input ended early or the failure is not tied to a position.
        column: 1-based column of the offending character, or None.
        expected: Names of the tokens that would have been accepted.
    """

    def __init__(
        self,
        message: str,
        text: str,
        position: Optional[int] = None,
        column: Optional[int] = None,
        expected: Sequence[str] = (),
        context: str = "",
    ):
        self.text = text
        self.position = position
        self.column = column
        self.expected = tuple(sorted(expected))
        self.context = context

        details = [f"Could not parse geometry description {text!r}: {message}"]
        if column is not None:
            details[0] += f" (column {column})"
        if self.expected:
            details.append(f"Expected one of: {', '.join(self.expected)}")
        if context:
            details.append(context.rstrip("\n"))
        super().__init__("\n".join(details))


class UnsupportedGeometryError(GeometryError):
    """A geometry piece cannot be expressed in the requested output format.

    Attributes:
        piece: The offending geometry piece.
        read_num: The read (1 or 2) the piece belongs to.
    """

    def __init__(self, piece, read_num: int, reason: str):
        self.piece = piece
        self.read_num = read_num
        super().__init__(f"Read {read_num} piece '{piece}': {reason}")
