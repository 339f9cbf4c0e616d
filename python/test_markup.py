"""
Tests for visual_levenshtein.markup and the grouped edit models.

Run: pytest python/test_markup.py
"""

from typing import List

import pytest
from pydantic import TypeAdapter, ValidationError

from visual_levenshtein.markup import critic_markup_encoder, encode_edits, word_diff_encoder
from visual_levenshtein.models import DeletionEdit, Edit, EqualityEdit, InsertionEdit, SubstitutionEdit
from visual_levenshtein.transformations import EditKind

EDITS = [
    EqualityEdit(text="S"),
    DeletionEdit(text="at"),
    EqualityEdit(text="u"),
    SubstitutionEdit(origin="r", dest="n"),
    EqualityEdit(text="day"),
    InsertionEdit(text="!"),
]


def test_word_diff_encoder():
    assert encode_edits(EDITS, word_diff_encoder) == "S[-at-]u[-r-]{+n+}day{+!+}"


def test_critic_markup_encoder():
    assert encode_edits(EDITS, critic_markup_encoder) == "S{--at--}u{--r--}{++n++}day{++!++}"


def test_custom_encoder_sees_every_edit_in_order():
    seen = []

    def encoder(edit):
        seen.append(edit.kind)
        return f"<{edit.kind}>"

    assert encode_edits(EDITS, encoder) == "<equality><deletion><equality><substitution><equality><insertion>"
    assert seen == ["equality", "deletion", "equality", "substitution", "equality", "insertion"]


def test_encode_nothing():
    assert encode_edits([], word_diff_encoder) == ""


def test_builtin_encoders_reject_foreign_objects():
    with pytest.raises(TypeError):
        word_diff_encoder("text")
    with pytest.raises(TypeError):
        critic_markup_encoder(None)


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------

def test_edit_kinds_match_transformation_kinds():
    assert EqualityEdit(text="").kind == EditKind.EQUALITY
    assert DeletionEdit(text="").kind == EditKind.DELETION
    assert InsertionEdit(text="").kind == EditKind.INSERTION
    assert SubstitutionEdit(origin="", dest="").kind == EditKind.SUBSTITUTION


def test_edit_sides():
    sub = SubstitutionEdit(origin="r", dest="n")
    assert (sub.origin_text, sub.dest_text) == ("r", "n")
    assert (DeletionEdit(text="at").origin_text, DeletionEdit(text="at").dest_text) == ("at", "")
    assert (InsertionEdit(text="g").origin_text, InsertionEdit(text="g").dest_text) == ("", "g")
    assert (EqualityEdit(text="day").origin_text, EqualityEdit(text="day").dest_text) == ("day", "day")


def test_edits_are_frozen():
    edit = EqualityEdit(text="S")
    with pytest.raises(ValidationError):
        edit.text = "T"


def test_edits_validate_field_types():
    with pytest.raises(ValidationError):
        EqualityEdit(text=1)
    with pytest.raises(ValidationError):
        SubstitutionEdit(origin="a")


def test_edits_round_trip_through_discriminated_union():
    adapter = TypeAdapter(List[Edit])
    dumped = adapter.dump_python(EDITS)
    assert dumped[3] == {"kind": "substitution", "origin": "r", "dest": "n"}
    assert adapter.validate_python(dumped) == EDITS
