"""
Construction of the full Levenshtein cost matrix.

The matrix keeps, for every (x, y), the operation that reached that cell at
minimum cost rather than just the cost, so that a single minimal edit script
can be recovered by walking it backwards (see backtrack.py).
"""

from typing import List, Sequence, Tuple, Union

import structlog

from visual_levenshtein.tokens import Token
from visual_levenshtein.transformations import (
    Deletion,
    Equality,
    Init,
    Insertion,
    Substitution,
    Transformation,
)

logger = structlog.get_logger(__name__)


def edit_step(from_cost: int, origin: Token, dest: Token) -> Union[Equality, Substitution]:
    """Diagonal move from a cell of cost `from_cost`: free if the tokens match."""
    if origin == dest:
        return Equality(from_cost, dest)
    return Substitution(from_cost + 1, origin, dest)


def cheapest(
    insertion: Insertion,
    deletion: Deletion,
    sub_or_eq: Union[Equality, Substitution],
) -> Transformation:
    """
    Picks the minimum-cost candidate for a cell.

    Ties go to the diagonal move first, then to deletion, so among equally
    short scripts the rendered one prefers substitutions over delete/insert
    pairs and deletions before insertions.
    """
    insertion_v_deletion = insertion if insertion.cost < deletion.cost else deletion
    if insertion_v_deletion.cost < sub_or_eq.cost:
        return insertion_v_deletion
    return sub_or_eq


class CostMatrix:
    """Immutable (n+1) x (m+1) grid of cells for one origin/dest pair."""

    def __init__(
        self,
        origin: Tuple[Token, ...],
        dest: Tuple[Token, ...],
        cells: Tuple[Tuple[Transformation, ...], ...],
    ):
        self._origin = origin
        self._dest = dest
        self._cells = cells

    @property
    def origin(self) -> Tuple[Token, ...]:
        return self._origin

    @property
    def dest(self) -> Tuple[Token, ...]:
        return self._dest

    @property
    def rows(self) -> int:
        return len(self._origin) + 1

    @property
    def cols(self) -> int:
        return len(self._dest) + 1

    @property
    def distance(self) -> int:
        return self.cell(len(self._origin), len(self._dest)).cost

    def cell(self, x: int, y: int) -> Transformation:
        return self._cells[x][y]

    def __getitem__(self, x: int) -> Tuple[Transformation, ...]:
        return self._cells[x]

    def __len__(self) -> int:
        return len(self._cells)

    def __repr__(self) -> str:
        return f"CostMatrix(rows={self.rows}, cols={self.cols}, distance={self.distance})"


def build_matrix(origin: Sequence[Token], dest: Sequence[Token]) -> CostMatrix:
    origin = tuple(origin)
    dest = tuple(dest)
    x_dim = len(origin) + 1
    y_dim = len(dest) + 1

    # Row 0: reach each dest prefix from nothing by insertions only.
    first_row: List[Transformation] = [Init(0)]
    for y in range(1, y_dim):
        first_row.append(Insertion(y, dest[y - 1]))
    rows: List[List[Transformation]] = [first_row]

    for x in range(1, x_dim):
        above = rows[x - 1]
        current: List[Transformation] = [Deletion(x, origin[x - 1])]
        for y in range(1, y_dim):
            deletion = Deletion(above[y].cost + 1, origin[x - 1])
            insertion = Insertion(current[y - 1].cost + 1, dest[y - 1])
            sub_or_eq = edit_step(above[y - 1].cost, origin[x - 1], dest[y - 1])
            current.append(cheapest(insertion, deletion, sub_or_eq))
        rows.append(current)

    matrix = CostMatrix(origin, dest, tuple(tuple(row) for row in rows))
    logger.debug("Built cost matrix", rows=x_dim, cols=y_dim, distance=matrix.distance)
    return matrix
