"""
Unicode segmentation of input text into comparable tokens.

Tokens are views into the original string: a token keeps a reference to its
source text plus a [start, end) span, and only materializes the substring when
its text is needed.
"""

from enum import Enum
from typing import Iterable, Tuple, Union

from uniseg.graphemecluster import grapheme_clusters
from uniseg.wordbreak import words as word_segments


class Granularity(str, Enum):
    GRAPHEME = "grapheme"
    WORD = "word"


class Token:
    __slots__ = ("source", "start", "end")

    def __init__(self, source: str, start: int, end: int):
        self.source = source
        self.start = start
        self.end = end

    @property
    def text(self) -> str:
        return self.source[self.start : self.end]

    def __len__(self) -> int:
        return self.end - self.start

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return f"Token({self.text!r})"

    def __eq__(self, other) -> bool:
        if isinstance(other, Token):
            if len(self) != len(other):
                return False
            return self.source.startswith(other.text, self.start, self.end)
        if isinstance(other, str):
            return len(self) == len(other) and self.source.startswith(other, self.start, self.end)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.text)


def _spans(text: str, segments: Iterable[str]) -> Tuple[Token, ...]:
    """Converts consecutive segment strings back into offsets over `text`."""
    tokens = []
    offset = 0
    for segment in segments:
        end = offset + len(segment)
        tokens.append(Token(text, offset, end))
        offset = end
    return tuple(tokens)


def graphemes(text: str) -> Tuple[Token, ...]:
    """Splits text into extended grapheme clusters."""
    return _spans(text, grapheme_clusters(text))


def words(text: str) -> Tuple[Token, ...]:
    """
    Splits text on UAX #29 word boundaries.
    Whitespace runs and punctuation marks come out as tokens of their own,
    e.g. "much, hey" -> ["much", ",", " ", "hey"].
    """
    return _spans(text, word_segments(text))


def tokenize(text: str, granularity: Union[Granularity, str] = Granularity.GRAPHEME) -> Tuple[Token, ...]:
    if not isinstance(text, str):
        raise TypeError(f"Expected str, got {type(text).__name__}")

    try:
        granularity = Granularity(granularity)
    except ValueError:
        raise ValueError(f"Unknown granularity: {granularity!r}") from None

    if granularity is Granularity.WORD:
        return words(text)
    return graphemes(text)
