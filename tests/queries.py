from collections import Counter

import numpy as np


def generate_random_queries(text, count, rng=None):
    """Random valid access, rank and select queries over text."""
    rng = rng if rng is not None else np.random.default_rng()
    n = len(text)
    occurrences = Counter(text)
    symbols = sorted(occurrences)

    positions = rng.integers(0, n, size=count).tolist()
    picked = rng.integers(0, len(symbols), size=count).tolist()

    select_queries = []
    for i in picked:
        symbol = symbols[i]
        k = int(rng.integers(1, occurrences[symbol] + 1))  # Ensure k never exceeds the occurrences
        select_queries.append((symbol, k))

    return {
        'access': positions,
        'rank': [(symbols[i], p) for i, p in zip(picked, positions)],
        'select': select_queries,
    }
