"""FGDL parser built on the lark grammar in ``grammar/frag_geom.lark``."""

import logging
from pathlib import Path
from typing import Optional

from lark import Lark, Tree
from lark.exceptions import UnexpectedEOF, UnexpectedInput, VisitError

from .builder import GeometryBuilder
from .exceptions import GeometryError, GeometrySyntaxError
from .models import FragmentGeomDesc

logger = logging.getLogger(__name__)

GRAMMAR_FILE = Path(__file__).parent / "grammar" / "frag_geom.lark"


class FragGeomParser:
    """Parser for fragment geometry descriptions.

    Loads the FGDL grammar and parses description strings into lark trees,
    or directly into ``FragmentGeomDesc`` objects.
    """

    def __init__(self, grammar_file: Optional[Path] = None, start_symbol: str = "frag_desc"):
        """
        Initialize the parser.

        Args:
            grammar_file: Path to the grammar file (defaults to the bundled FGDL grammar)
            start_symbol: The start symbol for grammar parsing
        """
        self.grammar_file = Path(grammar_file) if grammar_file else GRAMMAR_FILE
        self.start_symbol = start_symbol
        self.lark = Lark(
            self.grammar_file.read_text(),
            start=start_symbol,
            parser="earley",
        )

    def parse(self, text: str) -> Tree:
        """Parse ``text`` into a concrete parse tree.

        The whole input must match; there is no partial success.

        Raises:
            GeometrySyntaxError: If ``text`` does not conform to the grammar.
        """
        try:
            return self.lark.parse(text)
        except UnexpectedInput as e:
            raise self._syntax_error(text, e) from e

    def parse_geometry(self, text: str) -> FragmentGeomDesc:
        """Parse ``text`` and build its ``FragmentGeomDesc``."""
        tree = self.parse(text)
        try:
            geometry = GeometryBuilder(text).transform(tree)
        except VisitError as e:
            if isinstance(e.orig_exc, GeometryError):
                raise e.orig_exc from None
            raise
        logger.debug(f"Parsed geometry {text!r} as {geometry!r}")
        return geometry

    def _describe_terminal(self, name: str) -> str:
        pattern = self.lark.get_terminal(name).pattern
        if pattern.type == "str":
            return f'"{pattern.value}"'
        return name

    def _syntax_error(self, text: str, e: UnexpectedInput) -> GeometrySyntaxError:
        expected = getattr(e, "expected", None) or getattr(e, "allowed", None) or ()
        expected = {self._describe_terminal(name) for name in expected}

        if isinstance(e, UnexpectedEOF) or e.pos_in_stream is None or e.pos_in_stream < 0:
            return GeometrySyntaxError("unexpected end of input", text, expected=expected)

        position = e.pos_in_stream
        if position < len(text):
            message = f"unexpected character {text[position]!r}"
        else:
            message = "unexpected end of input"
        return GeometrySyntaxError(
            message,
            text,
            position=position,
            column=e.column,
            expected=expected,
            context=e.get_context(text),
        )


def parse_geometry(text: str) -> FragmentGeomDesc:
    """Parse an FGDL description into a ``FragmentGeomDesc``.

    Args:
        text: Description such as ``"1{b[16]u[12]x:}2{r:}"``

    Returns:
        The parsed geometry

    Raises:
        GeometrySyntaxError: If ``text`` is not a valid description
    """
    return FragGeomParser().parse_geometry(text)
