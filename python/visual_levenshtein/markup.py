"""
Rendering of grouped edits into a single annotated string.

An encoder is any callable mapping one grouped edit to a text fragment; the
fragments are concatenated in order with nothing in between.
"""

from typing import Callable, Iterable

from visual_levenshtein.models import DeletionEdit, Edit, EqualityEdit, InsertionEdit, SubstitutionEdit

Encoder = Callable[[Edit], str]


def encode_edits(edits: Iterable[Edit], encoder: Encoder) -> str:
    return "".join(encoder(edit) for edit in edits)


def word_diff_encoder(edit: Edit) -> str:
    """wdiff-style markers: [-removed-] and {+added+}."""
    if isinstance(edit, EqualityEdit):
        return edit.text
    if isinstance(edit, DeletionEdit):
        return f"[-{edit.text}-]"
    if isinstance(edit, InsertionEdit):
        return f"{{+{edit.text}+}}"
    if isinstance(edit, SubstitutionEdit):
        return f"[-{edit.origin}-]{{+{edit.dest}+}}"
    raise TypeError(f"Not a grouped edit: {edit!r}")


def critic_markup_encoder(edit: Edit) -> str:
    """
    CriticMarkup annotations: {--removed--} and {++added++}.
    A substitution renders as a deletion immediately followed by an insertion.
    """
    if isinstance(edit, EqualityEdit):
        return edit.text
    if isinstance(edit, DeletionEdit):
        return f"{{--{edit.text}--}}"
    if isinstance(edit, InsertionEdit):
        return f"{{++{edit.text}++}}"
    if isinstance(edit, SubstitutionEdit):
        return f"{{--{edit.origin}--}}{{++{edit.dest}++}}"
    raise TypeError(f"Not a grouped edit: {edit!r}")
