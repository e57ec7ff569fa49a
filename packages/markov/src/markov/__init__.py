"""
markov — Online Transition Matrix
=================================

Row i holds the observed distribution of transitions out of state i,
updated one observation at a time.

    tm = markov.TransitionMatrix(3)
    tm.record_transition(0, 1)
    tm.argmax(0)                 # → 1
    two_step = tm @ tm           # or markov.multiply(tm, tm), tm.power(2)
    print(markov.render(two_step))

Rows that have never been observed are all zeros, not uniform. Their
argmax and argmin are both column 0.
"""

__version__ = '0.1.0'

from markov.matrix import (
    TransitionMatrix,
    multiply,
    render,
    InvalidIndex,
    SizeMismatch,
    InvalidArgument,
)
from markov.config import CONFIG, get as get_config

__all__ = [
    'TransitionMatrix',
    'multiply',
    'render',
    'InvalidIndex',
    'SizeMismatch',
    'InvalidArgument',
    'CONFIG',
    'get_config',
]
