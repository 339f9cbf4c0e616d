from importlib.metadata import PackageNotFoundError, version

from visual_levenshtein.engine import (
    Levenshtein,
    distance,
    encoded_edits,
    grouped_edits,
    levenshtein,
    levenshtein_words,
    raw_edits,
)
from visual_levenshtein.errors import InvariantViolation, LevenshteinError
from visual_levenshtein.grouping import dest_text, origin_text
from visual_levenshtein.markup import Encoder, critic_markup_encoder, encode_edits, word_diff_encoder
from visual_levenshtein.models import DeletionEdit, Edit, EqualityEdit, InsertionEdit, SubstitutionEdit
from visual_levenshtein.tokens import Granularity, Token
from visual_levenshtein.transformations import (
    Deletion,
    EditKind,
    Equality,
    Init,
    Insertion,
    Substitution,
    Transformation,
)

try:
    __version__ = version("visual-levenshtein")
except PackageNotFoundError:
    # Running from a source checkout without installation.
    __version__ = "0.0.0-dev"

__all__ = [
    "Levenshtein",
    "levenshtein",
    "levenshtein_words",
    "distance",
    "raw_edits",
    "grouped_edits",
    "encoded_edits",
    "encode_edits",
    "Encoder",
    "word_diff_encoder",
    "critic_markup_encoder",
    "origin_text",
    "dest_text",
    "Granularity",
    "Token",
    "EditKind",
    "Transformation",
    "Init",
    "Equality",
    "Deletion",
    "Insertion",
    "Substitution",
    "Edit",
    "EqualityEdit",
    "DeletionEdit",
    "InsertionEdit",
    "SubstitutionEdit",
    "LevenshteinError",
    "InvariantViolation",
    "__version__",
]
