class WaveletTreeError(Exception):
    """Base class for every failure reported by the wavelet tree and its parts."""


class OutOfRangeError(WaveletTreeError, IndexError):
    """An index lies outside the structure being queried."""

    def __init__(self, index, length):
        super().__init__(f"index {index} out of range [0, {length})")
        self.index = index
        self.length = length


class InvalidCountError(WaveletTreeError, ValueError):
    """A select count is below 1 or above the number of occurrences."""

    def __init__(self, target, k):
        super().__init__(f"no occurrence #{k} of {target!r}")
        self.target = target
        self.k = k


class UnknownSymbolError(WaveletTreeError, KeyError):
    """A symbol has no code in the codex."""

    def __init__(self, symbol):
        super().__init__(symbol)
        self.symbol = symbol

    def __str__(self):
        return f"symbol {self.symbol!r} is not in the codex"


class CodexCollisionError(WaveletTreeError, ValueError):
    """The alphabet does not fit in the requested code width."""

    def __init__(self, alphabet_size, width):
        super().__init__(
            f"{alphabet_size} symbols do not fit in {width}-bit codes "
            f"(capacity {2 ** width})"
        )
        self.alphabet_size = alphabet_size
        self.width = width
