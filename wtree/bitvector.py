import numpy as np

from wtree.errors import InvalidCountError, OutOfRangeError


class BitVector:
    """Immutable sequence of 0/1 symbols answering rank and select.

    The bits live in a read-only ``uint8`` array next to two prefix-count
    arrays, ``_ones[j]`` and ``_zeros[j]`` being the number of ones and
    zeros in ``bits[0:j]``. Rank is a single lookup, select a binary search
    over the matching prefix counts.
    """

    def __init__(self, bits):
        if not isinstance(bits, np.ndarray):
            bits = np.array(list(bits), dtype=np.int64)
        if bits.ndim != 1:
            raise ValueError("a bit vector must be one-dimensional")
        if bits.size and not np.isin(bits, (0, 1)).all():
            raise ValueError("a bit vector may only hold 0 and 1")

        self.length = int(bits.size)
        self.bits = bits.astype(np.uint8)
        self._ones = np.zeros(self.length + 1, dtype=np.int64)
        np.cumsum(self.bits, dtype=np.int64, out=self._ones[1:])
        self._zeros = np.arange(self.length + 1, dtype=np.int64) - self._ones

        for array in (self.bits, self._ones, self._zeros):
            array.setflags(write=False)

    def _prefix_counts(self, target):
        if target == 1:
            return self._ones
        if target == 0:
            return self._zeros
        raise ValueError(f"bit target must be 0 or 1, got {target!r}")

    def rank(self, target, index):
        """Number of ``target`` bits in the inclusive prefix ``[0, index]``."""
        counts = self._prefix_counts(target)
        if not 0 <= index < self.length:
            raise OutOfRangeError(index, self.length)
        return int(counts[index + 1])

    def select(self, target, k):
        """0-based position of the ``k``-th (1-based) ``target`` bit."""
        counts = self._prefix_counts(target)
        if k < 1 or k > counts[-1]:
            raise InvalidCountError(target, k)
        # first prefix holding k targets ends right after the k-th one
        return int(np.searchsorted(counts, k, side="left")) - 1

    def count(self, target):
        return int(self._prefix_counts(target)[-1])

    def __len__(self):
        return self.length

    def __getitem__(self, index):
        if not 0 <= index < self.length:
            raise OutOfRangeError(index, self.length)
        return int(self.bits[index])

    def __iter__(self):
        return iter(self.bits.tolist())

    def __eq__(self, other):
        if isinstance(other, BitVector):
            return np.array_equal(self.bits, other.bits)
        try:
            return self.bits.tolist() == list(other)
        except TypeError:
            return NotImplemented

    def __repr__(self):
        return f"BitVector({''.join(map(str, self.bits.tolist()))})"
