"""Alphabet derivation and fixed-width code assignment.

A codex maps every symbol of an alphabet to the binary representation of
its rank in sorted order, left-padded with zeros to a common width. The
sentinel ``$`` always sorts first so it receives the all-zero code.
"""
from collections.abc import Mapping

import numpy as np

from wtree.errors import CodexCollisionError, UnknownSymbolError

SENTINEL = "$"
# code values are shifted inside int64 arrays during construction
MAX_CODE_WIDTH = 62


def derive_alphabet(sequence, sentinel=SENTINEL):
    """Distinct symbols of ``sequence`` in sorted order, sentinel first."""
    symbols = set(sequence)
    has_sentinel = sentinel in symbols
    symbols.discard(sentinel)
    alphabet = sorted(symbols)
    if has_sentinel:
        alphabet.insert(0, sentinel)
    return tuple(alphabet)


def code_width(alphabet_size):
    """Smallest width ``L >= 1`` with ``2 ** L >= alphabet_size``."""
    return max(1, (alphabet_size - 1).bit_length())


def to_bits(value, width):
    return tuple((value >> shift) & 1 for shift in range(width - 1, -1, -1))


class Codex(Mapping):
    """Immutable, invertible mapping from symbols to fixed-width codes."""

    def __init__(self, alphabet, width=None):
        alphabet = tuple(alphabet)
        if not alphabet:
            raise ValueError("cannot assign codes to an empty alphabet")
        if len(set(alphabet)) != len(alphabet):
            raise ValueError("alphabet symbols must be distinct")

        if width is None:
            width = code_width(len(alphabet))
        elif width < 1:
            raise ValueError(f"code width must be at least 1, got {width}")
        elif 2 ** width < len(alphabet):
            raise CodexCollisionError(len(alphabet), width)
        if width > MAX_CODE_WIDTH:
            raise ValueError(f"code width {width} exceeds {MAX_CODE_WIDTH}")

        self.alphabet = alphabet
        self.width = width
        self._values = {symbol: value for value, symbol in enumerate(alphabet)}
        self._codes = {symbol: to_bits(value, width) for symbol, value in self._values.items()}
        self._symbols = {code: symbol for symbol, code in self._codes.items()}

    def __getitem__(self, symbol):
        try:
            return self._codes[symbol]
        except (KeyError, TypeError):
            raise UnknownSymbolError(symbol) from None

    def __iter__(self):
        return iter(self.alphabet)

    def __len__(self):
        return len(self.alphabet)

    def value(self, symbol):
        """Integer whose binary expansion is the code of ``symbol``."""
        try:
            return self._values[symbol]
        except (KeyError, TypeError):
            raise UnknownSymbolError(symbol) from None

    def encode(self, sequence):
        """Code values of every symbol of ``sequence`` as an int64 array."""
        return np.fromiter((self.value(symbol) for symbol in sequence), dtype=np.int64)

    def decode(self, code):
        """Symbol owning ``code``; accepts any iterable of bits."""
        code = tuple(int(bit) for bit in code)
        try:
            return self._symbols[code]
        except KeyError:
            raise KeyError(f"no symbol has code {''.join(map(str, code))}") from None

    def __repr__(self):
        codes = ", ".join(
            f"{symbol!r}: {''.join(map(str, code))}" for symbol, code in self._codes.items()
        )
        return f"Codex(width={self.width}, {{{codes}}})"


def build_codex(alphabet_or_sequence, width=None):
    """Build a codex from an explicit alphabet or from the symbols of a sequence.

    Both inputs go through ``derive_alphabet`` so duplicates collapse and the
    sentinel keeps the smallest code. With no ``width`` the narrowest one that
    holds the alphabet is chosen; an explicit width too narrow for the
    alphabet raises ``CodexCollisionError``.
    """
    return Codex(derive_alphabet(alphabet_or_sequence), width=width)
