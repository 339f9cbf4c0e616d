"""
Run-length grouping of raw edits.

Consecutive raw edits of the same kind are merged into a single grouped edit
whose text is the plain concatenation of the token texts. Whitespace is a
token of its own, so the joined text is exactly the original substring.
"""

from typing import Iterable, List, Optional, Sequence

import structlog

from visual_levenshtein.errors import InvariantViolation
from visual_levenshtein.models import DeletionEdit, Edit, EqualityEdit, InsertionEdit, SubstitutionEdit
from visual_levenshtein.transformations import (
    Deletion,
    EditKind,
    Equality,
    Insertion,
    Substitution,
    Transformation,
)

logger = structlog.get_logger(__name__)


def _flush(kind: EditKind, chunks: List[str], dest_chunks: List[str]) -> Edit:
    text = "".join(chunks)
    if kind is EditKind.EQUALITY:
        return EqualityEdit(text=text)
    if kind is EditKind.DELETION:
        return DeletionEdit(text=text)
    if kind is EditKind.INSERTION:
        return InsertionEdit(text=text)
    if kind is EditKind.SUBSTITUTION:
        return SubstitutionEdit(origin=text, dest="".join(dest_chunks))
    raise InvariantViolation(f"Cannot group a run of kind {kind!r}")


def group_edits(raw: Sequence[Transformation]) -> List[Edit]:
    """
    Collapses maximal same-kind runs of `raw` into grouped edits.

    An empty raw sequence (both texts empty) groups to an empty list.
    """
    grouped: List[Edit] = []
    current: Optional[EditKind] = None
    chunks: List[str] = []
    dest_chunks: List[str] = []

    for step in raw:
        if step.kind is not current:
            if current is not None:
                grouped.append(_flush(current, chunks, dest_chunks))
            current = step.kind
            chunks = []
            dest_chunks = []

        if isinstance(step, (Equality, Deletion, Insertion)):
            chunks.append(str(step.token))
        elif isinstance(step, Substitution):
            chunks.append(str(step.origin))
            dest_chunks.append(str(step.dest))
        else:
            raise InvariantViolation(f"{step!r} cannot appear in a raw edit sequence")

    if current is not None:
        grouped.append(_flush(current, chunks, dest_chunks))

    logger.debug("Grouped edits", raw=len(raw), grouped=len(grouped))
    return grouped


def origin_text(edits: Iterable[Edit]) -> str:
    """Rebuilds the origin text from grouped edits."""
    return "".join(edit.origin_text for edit in edits)


def dest_text(edits: Iterable[Edit]) -> str:
    """Rebuilds the destination text from grouped edits."""
    return "".join(edit.dest_text for edit in edits)
