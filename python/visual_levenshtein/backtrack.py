from typing import List

import structlog

from visual_levenshtein.errors import InvariantViolation
from visual_levenshtein.matrix import CostMatrix
from visual_levenshtein.transformations import Deletion, Equality, Insertion, Substitution, Transformation

logger = structlog.get_logger(__name__)


def trace_edits(matrix: CostMatrix) -> List[Transformation]:
    """
    Walks the matrix from the bottom-right corner back to (0, 0) and returns
    the cells on the way, in origin-to-dest order.
    """
    x = len(matrix.origin)
    y = len(matrix.dest)
    transformations: List[Transformation] = []

    while x > 0 or y > 0:
        step = matrix.cell(x, y)
        if isinstance(step, Insertion):
            y -= 1
        elif isinstance(step, Deletion):
            x -= 1
        elif isinstance(step, (Equality, Substitution)):
            x -= 1
            y -= 1
        else:
            raise InvariantViolation(f"Reached {step!r} at ({x}, {y}) before the matrix origin")
        transformations.append(step)

    transformations.reverse()
    logger.debug("Traced edit path", steps=len(transformations))
    return transformations
