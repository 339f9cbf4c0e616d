from functools import cached_property
from typing import List, Tuple, Union

from visual_levenshtein.backtrack import trace_edits
from visual_levenshtein.grouping import group_edits
from visual_levenshtein.markup import Encoder, encode_edits
from visual_levenshtein.matrix import CostMatrix, build_matrix
from visual_levenshtein.models import Edit
from visual_levenshtein.tokens import Granularity, Token, tokenize
from visual_levenshtein.transformations import Transformation


class Levenshtein:
    """
    Edit distance and minimal edit script between two texts.

    Both texts are tokenized once, on construction. The cost matrix is built
    on the first query and shared by every later one; raw, grouped and
    encoded edits are recomputed from it on each call.

    Instances are not thread-safe until `matrix` has been built.
    """

    def __init__(self, origin: str, dest: str, granularity: Union[Granularity, str] = Granularity.GRAPHEME):
        self.origin_tokens: Tuple[Token, ...] = tokenize(origin, granularity)
        self.dest_tokens: Tuple[Token, ...] = tokenize(dest, granularity)
        self.granularity = Granularity(granularity)
        self.origin = origin
        self.dest = dest

    @cached_property
    def matrix(self) -> CostMatrix:
        return build_matrix(self.origin_tokens, self.dest_tokens)

    def distance(self) -> int:
        return self.matrix.distance

    def raw_edits(self) -> List[Transformation]:
        """One Equality/Deletion/Insertion/Substitution per token step, origin to dest."""
        return trace_edits(self.matrix)

    def grouped_edits(self) -> List[Edit]:
        return group_edits(self.raw_edits())

    def encoded_edits(self, encoder: Encoder) -> str:
        return encode_edits(self.grouped_edits(), encoder)

    def __repr__(self) -> str:
        return (
            f"Levenshtein(origin={self.origin!r}, dest={self.dest!r}, granularity={self.granularity.value!r})"
        )


def levenshtein(origin: str, dest: str) -> Levenshtein:
    """Grapheme-level calculator."""
    return Levenshtein(origin, dest, Granularity.GRAPHEME)


def levenshtein_words(origin: str, dest: str) -> Levenshtein:
    """Word-level calculator: tokens are UAX #29 word-bounded segments."""
    return Levenshtein(origin, dest, Granularity.WORD)


def distance(origin: str, dest: str, granularity: Union[Granularity, str] = Granularity.GRAPHEME) -> int:
    return Levenshtein(origin, dest, granularity).distance()


def raw_edits(
    origin: str, dest: str, granularity: Union[Granularity, str] = Granularity.GRAPHEME
) -> List[Transformation]:
    return Levenshtein(origin, dest, granularity).raw_edits()


def grouped_edits(origin: str, dest: str, granularity: Union[Granularity, str] = Granularity.GRAPHEME) -> List[Edit]:
    return Levenshtein(origin, dest, granularity).grouped_edits()


def encoded_edits(
    origin: str,
    dest: str,
    encoder: Encoder,
    granularity: Union[Granularity, str] = Granularity.GRAPHEME,
) -> str:
    return Levenshtein(origin, dest, granularity).encoded_edits(encoder)
