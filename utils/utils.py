import time


def time_function(func):
    """
    Decorator to measure the execution time of a function
    """
    def wrapper(*args, **kwargs):
        start_time = time.perf_counter()
        result = func(*args, **kwargs)
        execution_time = time.perf_counter() - start_time
        return result, execution_time
    return wrapper


def naive_rank(sequence, symbol, index):
    """Occurrences of symbol in sequence[0..index], by direct counting."""
    return sum(1 for s in sequence[:index + 1] if s == symbol)


def naive_select(sequence, symbol, k):
    """Position of the k-th occurrence of symbol, or None if there is none."""
    seen = 0
    for position, s in enumerate(sequence):
        if s == symbol:
            seen += 1
            if seen == k:
                return position
    return None
