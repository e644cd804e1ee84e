import logging

import numpy as np

from wtree.bitvector import BitVector
from wtree.codex import build_codex
from wtree.errors import InvalidCountError, OutOfRangeError, UnknownSymbolError

logger = logging.getLogger(__name__)


class _EmptyNode:
    """Terminal node: no symbols reach it, or every code bit is consumed."""

    __slots__ = ()

    def __len__(self):
        return 0

    def __repr__(self):
        return "EMPTY"


EMPTY = _EmptyNode()


class InternalNode:
    """Node holding bit ``depth`` of the code of every symbol that reaches it."""

    __slots__ = ("bit_vector", "left", "right", "depth")

    def __init__(self, bit_vector, left, right, depth):
        self.bit_vector = bit_vector
        self.left = left
        self.right = right
        self.depth = depth

    def child(self, bit):
        return self.right if bit else self.left

    def __len__(self):
        return len(self.bit_vector)

    def __eq__(self, other):
        if not isinstance(other, InternalNode):
            return NotImplemented
        return (
            self.depth == other.depth
            and self.bit_vector == other.bit_vector
            and self.left == other.left
            and self.right == other.right
        )

    __hash__ = None

    def __repr__(self):
        return f"InternalNode(depth={self.depth}, {self.bit_vector!r})"


def _construct(values, depth, width):
    if values.size == 0 or depth == width:
        return EMPTY

    bits = (values >> (width - 1 - depth)) & 1
    goes_right = bits.astype(bool)
    # boolean masking keeps the original relative order on both sides
    return InternalNode(
        BitVector(bits),
        _construct(values[~goes_right], depth + 1, width),
        _construct(values[goes_right], depth + 1, width),
        depth,
    )


class WaveletTree:
    """Wavelet tree answering access, rank and select over a sequence.

    The sequence is partitioned level by level on the bits of each symbol's
    fixed-width code: the root stores the first code bit of every symbol,
    its left child the second bit of the symbols whose first bit is 0, and
    so on down to the last bit. The codex is kept on the tree and shared by
    every query.
    """

    def __init__(self, root, codex, length):
        self.root = root
        self.codex = codex
        self.length = length

    @classmethod
    def build(cls, sequence, codex=None):
        """Index ``sequence``; the codex defaults to one derived from it."""
        if codex is None:
            codex = build_codex(sequence)
        values = codex.encode(sequence)
        root = _construct(values, 0, codex.width)

        tree = cls(root, codex, int(values.size))
        logger.debug(
            "built wavelet tree: n=%d, alphabet=%d, width=%d",
            tree.length, len(codex), codex.width,
        )
        return tree

    @property
    def height(self):
        return self.codex.width

    def __len__(self):
        return self.length

    def _check_index(self, index):
        if not 0 <= index < self.length:
            raise OutOfRangeError(index, self.length)

    def access(self, index):
        """Code of the symbol at ``index``."""
        self._check_index(index)
        node, i, code = self.root, index, []
        while node is not EMPTY:
            bit = node.bit_vector[i]
            code.append(bit)
            # position of the same symbol inside the child holding it
            i = node.bit_vector.rank(bit, i) - 1
            node = node.child(bit)
        return tuple(code)

    def access_symbol(self, index):
        return self.codex.decode(self.access(index))

    def rank(self, symbol, index):
        """Occurrences of ``symbol`` in the inclusive prefix ``[0, index]``."""
        code = self.codex[symbol]
        self._check_index(index)
        node, i, count = self.root, index, 0
        while node is not EMPTY:
            bit = code[node.depth]
            count = node.bit_vector.rank(bit, i)
            if count == 0:
                return 0
            i = count - 1
            node = node.child(bit)
        return count

    def select(self, symbol, k):
        """0-based position of the ``k``-th (1-based) occurrence of ``symbol``."""
        code = self.codex[symbol]
        if k < 1:
            raise InvalidCountError(symbol, k)

        stack = []
        node = self.root
        while node is not EMPTY:
            stack.append(node)
            node = node.child(code[node.depth])
        if not stack:
            raise InvalidCountError(symbol, k)

        # undo the per-level rank transforms deepest level first
        i = k
        while stack:
            node = stack.pop()
            try:
                i = node.bit_vector.select(code[node.depth], i) + 1
            except InvalidCountError:
                raise InvalidCountError(symbol, k) from None
        return i - 1

    def count(self, symbol):
        """Total occurrences of ``symbol`` in the sequence."""
        if self.length == 0:
            if symbol not in self.codex:
                raise UnknownSymbolError(symbol)
            return 0
        return self.rank(symbol, self.length - 1)

    def __iter__(self):
        for index in range(self.length):
            yield self.access_symbol(index)

    def decode(self):
        """Rebuild the indexed sequence as a list of symbols."""
        return list(self)

    def nodes(self):
        """Internal nodes in depth-first, left-before-right order."""
        pending = [self.root]
        while pending:
            node = pending.pop()
            if node is EMPTY:
                continue
            yield node
            pending.append(node.right)
            pending.append(node.left)

    def get_size_metrics(self):
        stored_bits = sum(len(node) for node in self.nodes())
        original_bits = self.length * 8

        counts = np.array([self.count(symbol) for symbol in self.codex], dtype=np.float64)
        h0 = 0.0
        if self.length:
            p = counts[counts > 0] / self.length
            h0 = float(-(p * np.log2(p)).sum())

        return {
            'sequence_length': self.length,
            'alphabet_size': len(self.codex),
            'code_width': self.codex.width,
            'node_count': sum(1 for _ in self.nodes()),
            'original_size': original_bits,
            'compressed_size': stored_bits,
            'compression_ratio': original_bits / stored_bits if stored_bits else 0.0,
            'space_saving': 1 - stored_bits / original_bits if original_bits else 0.0,
            'zeroth_order_entropy': h0,
            'entropy_efficiency': self.length * h0 / stored_bits if stored_bits else 0.0,
        }

    def __repr__(self):
        return f"WaveletTree(n={self.length}, alphabet={len(self.codex)}, width={self.codex.width})"
