"""
Markov Demo CLI
===============

Replays a fixed sequence of transitions on a 3-state matrix, printing the
table after each update, the most/least probable next state at a few
checkpoints, and finally the matrix raised to a power.

    markov-demo
    markov-demo --power 3
    markov-demo --quiet
    markov-demo --config overrides.yaml
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

from markov import config as markov_config
from markov.matrix import TransitionMatrix, render

SCENARIO: List[Tuple[int, int]] = [
    (0, 1), (1, 2), (2, 0), (0, 2), (1, 0),
    (2, 1), (0, 1), (1, 2), (2, 0), (0, 0),
    (1, 1), (2, 2), (0, 2), (1, 0), (2, 1),
]

# states the scenario visits
N_STATES = 1 + max(max(pair) for pair in SCENARIO)

# step number (1-based) → [(query, row)]
CHECKPOINTS: Dict[int, List[Tuple[str, int]]] = {
    2: [('max', 2)],
    4: [('min', 2)],
    10: [('max', 0)],
    15: [('max', 0), ('max', 1), ('max', 2)],
}


def run(
    power: int = 2,
    verbose: bool = True,
    config: Optional[Dict[str, Any]] = None,
) -> TransitionMatrix:
    """
    Run the demonstration scenario.

    Args:
        power: Exponent for the final k-step table
        verbose: Print the matrix after every update
        config: Config dict (defaults to markov.config.CONFIG)

    Returns:
        The matrix raised to `power`
    """
    cfg = config if config is not None else markov_config.CONFIG
    tm = TransitionMatrix(N_STATES)

    print("Initial Matrix:")
    print(render(tm, cfg))
    print()

    for step, (i, j) in enumerate(SCENARIO, start=1):
        tm.record_transition(i, j)
        if verbose:
            print(render(tm, cfg))
            print()
        for query, row in CHECKPOINTS.get(step, []):
            idx = tm.argmax(row) if query == 'max' else tm.argmin(row)
            label = 'Max' if query == 'max' else 'Min'
            print(f"{label} probability index for M[{row}]: {idx}")

    print(f"Raising matrix to power {power}...")
    result = tm.power(power)
    print(f"Matrix Raised to Power {power}:")
    print(render(result, cfg))
    return result


def main(argv: Optional[List[str]] = None):
    import argparse

    parser = argparse.ArgumentParser(description="Online Markov transition matrix demo")
    parser.add_argument('--power', '-p', type=int, default=None,
                        help='Power to raise the final matrix to')
    parser.add_argument('--config', '-c', help='YAML file with config overrides')
    parser.add_argument('--quiet', '-q', action='store_true',
                        help='Suppress per-update matrices')
    parser.add_argument('--verbose', '-v', action='store_true', help='Debug logging')

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    cfg = markov_config.load(args.config) if args.config else markov_config.CONFIG
    power = args.power if args.power is not None else cfg['demo']['power']

    run(power=power, verbose=not args.quiet, config=cfg)


if __name__ == '__main__':
    main()
