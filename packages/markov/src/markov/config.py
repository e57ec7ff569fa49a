"""
Markov Configuration
====================
Rendering and tolerance settings for transition matrices.
Single source of truth; YAML files may override any key.

Usage:
    from markov.config import CONFIG
    precision = CONFIG['render']['precision']

    from markov import config
    cfg = config.load('overrides.yaml')
"""

import copy
from pathlib import Path
from typing import Any, Dict, Union

import yaml

CONFIG = {

    # =================================================================
    # Text dump (render / str)
    # =================================================================
    'render': {
        'precision': 3,
        'separator': ' ',
    },

    # =================================================================
    # Numerical tolerances
    # =================================================================
    'tolerance': {
        'row_sum': 1e-9,
    },

    # =================================================================
    # Demonstration driver
    # =================================================================
    'demo': {
        'power': 2,
    },
}


def get(path: str, default=None):
    """
    Look up a nested CONFIG key, e.g. 'render.precision'.

    Returns default when any segment of the path is missing.

        get('render.precision')    → 3
        get('demo.nope', 0)        → 0
    """
    keys = path.split('.')
    val = CONFIG
    for key in keys:
        if isinstance(val, dict) and key in val:
            val = val[key]
        else:
            return default
    return val


def _merge(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _merge(base[key], value)
        else:
            base[key] = value
    return base


def load(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Defaults deep-merged with the YAML file at path.

    Returns a new dict. CONFIG is left untouched.
    """
    with open(path) as f:
        overrides = yaml.safe_load(f) or {}
    if not isinstance(overrides, dict):
        raise ValueError(f"{path}: expected a mapping at top level, got {type(overrides).__name__}")
    return _merge(copy.deepcopy(CONFIG), overrides)
