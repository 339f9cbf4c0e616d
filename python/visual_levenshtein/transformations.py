"""
Cells of the cost matrix.

Every cell records the cumulative edit cost up to that point and the
operation that produced it. A traceback through the matrix yields these same
objects as the raw, token-by-token edit script.
"""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Union

from visual_levenshtein.tokens import Token


class EditKind(str, Enum):
    INIT = "init"
    EQUALITY = "equality"
    DELETION = "deletion"
    INSERTION = "insertion"
    SUBSTITUTION = "substitution"


@dataclass(frozen=True)
class Init:
    cost: int
    kind: ClassVar[EditKind] = EditKind.INIT


@dataclass(frozen=True)
class Equality:
    cost: int
    token: Token
    kind: ClassVar[EditKind] = EditKind.EQUALITY


@dataclass(frozen=True)
class Deletion:
    cost: int
    token: Token
    kind: ClassVar[EditKind] = EditKind.DELETION


@dataclass(frozen=True)
class Insertion:
    cost: int
    token: Token
    kind: ClassVar[EditKind] = EditKind.INSERTION


@dataclass(frozen=True)
class Substitution:
    cost: int
    origin: Token
    dest: Token
    kind: ClassVar[EditKind] = EditKind.SUBSTITUTION


Transformation = Union[Init, Equality, Deletion, Insertion, Substitution]
