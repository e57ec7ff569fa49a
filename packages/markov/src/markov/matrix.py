"""
Online transition matrix.

Row i is the empirical distribution of transitions out of state i:

    P[i][j] = n(i → j) / n(i → ·)

Rows are stored as probabilities, not counts. Each observation converts
the row back to counts (P[i] * n), adds the new transition, and
renormalizes by n + 1. Rows never observed stay all-zero, so argmax and
argmin on them resolve to column 0.

Not thread-safe. Serialize record_transition() calls per instance.
"""

import logging
import numbers
from typing import Any, Dict, Iterable, List, Optional, Tuple

import numpy as np

from markov.config import CONFIG

logger = logging.getLogger(__name__)


class InvalidIndex(IndexError):
    """Row or column index outside [0, size)."""


class SizeMismatch(ValueError):
    """Operands of a matrix product have different sizes."""


class InvalidArgument(ValueError):
    """Non-positive size or power."""


def _as_positive_int(value: Any, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidArgument(f"{name} must be an integer, got {value!r}")
    if value < 1:
        raise InvalidArgument(f"{name} must be >= 1, got {value}")
    return int(value)


class TransitionMatrix:
    """
    Square table of transition probabilities updated one observation at a time.

    Parameters
    ----------
    size : int
        Number of states. The matrix is size × size.

    Raises
    ------
    InvalidArgument
        If size is not an integer >= 1.
    """

    def __init__(self, size: int):
        size = _as_positive_int(size, 'size')
        self._size = size
        self._probs = np.zeros((size, size), dtype=np.float64)
        self._counts = np.zeros(size, dtype=np.int64)

    @classmethod
    def from_transitions(cls, size: int, pairs: Iterable[Tuple[int, int]]) -> 'TransitionMatrix':
        """Build a matrix of the given size and record every (i, j) pair in order."""
        tm = cls(size)
        tm.record_transitions(pairs)
        return tm

    @property
    def size(self) -> int:
        return self._size

    @property
    def probabilities(self) -> np.ndarray:
        """Copy of the size × size probability table."""
        return self._probs.copy()

    def _check_index(self, idx: Any, name: str) -> int:
        if (isinstance(idx, bool) or not isinstance(idx, numbers.Integral)
                or not 0 <= idx < self._size):
            logger.warning("invalid %s index %r given size of %d", name, idx, self._size)
            raise InvalidIndex(f"{name} index {idx!r} out of range [0, {self._size})")
        return int(idx)

    def record_transition(self, i: int, j: int) -> None:
        """
        Record one observed transition from state i to state j.

        Only row i is touched. The row is rescaled to counts, incremented at
        column j, and divided by the new observation count, column by column
        in that order.
        """
        i = self._check_index(i, 'row')
        j = self._check_index(j, 'column')

        alpha = int(self._counts[i])
        row = self._probs[i] * alpha
        row[j] += 1
        self._probs[i] = row / (alpha + 1)
        self._counts[i] = alpha + 1
        logger.debug("recorded %d -> %d (row %d now has %d observations)",
                     i, j, i, alpha + 1)

    def record_transitions(self, pairs: Iterable[Tuple[int, int]]) -> int:
        """
        Record a sequence of (i, j) transitions in order.

        Every pair is validated before the first one is applied.

        Returns
        -------
        int — number of transitions recorded.
        """
        checked = [(self._check_index(i, 'row'), self._check_index(j, 'column'))
                   for i, j in pairs]
        for i, j in checked:
            self.record_transition(i, j)
        return len(checked)

    def row(self, i: int) -> np.ndarray:
        """Copy of row i."""
        i = self._check_index(i, 'row')
        return self._probs[i].copy()

    def argmax(self, i: int) -> int:
        """Most probable next state from i. Ties go to the lowest column."""
        i = self._check_index(i, 'row')
        return int(np.argmax(self._probs[i]))

    def argmin(self, i: int) -> int:
        """Least probable next state from i. Ties go to the lowest column."""
        i = self._check_index(i, 'row')
        return int(np.argmin(self._probs[i]))

    def is_normalized(self, i: int, config: Optional[Dict[str, Any]] = None) -> bool:
        """Whether row i sums to 1 within the configured tolerance."""
        i = self._check_index(i, 'row')
        cfg = config if config is not None else CONFIG
        tol = cfg['tolerance']['row_sum']
        return bool(abs(float(np.sum(self._probs[i])) - 1.0) <= tol)

    def power(self, k: int) -> 'TransitionMatrix':
        """
        k-step transition table M^k by repeated multiplication.

        result[i][j] is the probability of reaching j from i in exactly k
        transitions.
        """
        k = _as_positive_int(k, 'power')
        result = TransitionMatrix(self._size)
        result._probs[:] = self._probs
        for _ in range(k - 1):
            result = multiply(result, self)
        return result

    def to_list(self) -> List[List[float]]:
        """Probability table as nested lists of floats."""
        return self._probs.tolist()

    def __matmul__(self, other):
        if not isinstance(other, TransitionMatrix):
            return NotImplemented
        return multiply(self, other)

    def __str__(self) -> str:
        return render(self)

    def __repr__(self) -> str:
        return f"TransitionMatrix(size={self._size})"


def multiply(a: TransitionMatrix, b: TransitionMatrix) -> TransitionMatrix:
    """
    Matrix product a · b as a new TransitionMatrix.

    result[i][j] = Σ_k a[i][k] * b[k][j], summed in k order. O(size³).
    Observation counts of the result
    are zero; it is a derived table, not an observed one. Neither input is
    modified.

    Raises
    ------
    SizeMismatch
        If a.size != b.size.
    """
    if a.size != b.size:
        logger.warning("matrix sizes differ: %d != %d", a.size, b.size)
        raise SizeMismatch(f"both matrices must be of equal size, {a.size} != {b.size}")
    result = TransitionMatrix(a.size)
    # accumulate k = 0, 1, ... from 0.0; a BLAS matmul reorders the sum
    for k in range(a.size):
        result._probs += np.outer(a._probs[:, k], b._probs[k])
    return result


def render(m: TransitionMatrix, config: Optional[Dict[str, Any]] = None) -> str:
    """Row-major text dump, one row per line."""
    cfg = (config if config is not None else CONFIG)['render']
    fmt = f"{{:.{cfg['precision']}f}}"
    return '\n'.join(
        cfg['separator'].join(fmt.format(v) for v in row)
        for row in m._probs
    )
