# dictionary.py
# Word list indexed by digit encoding, plus the set of encoding prefixes so
# the translator can stop extending a prefix early.

from typing import Dict, Iterable, List, Set, Tuple

from encoder import word_to_encoding


class DictionaryIndex:
    """
    Encoding -> words lookup with the API the translator needs:
      - DictionaryIndex.build(words) -> DictionaryIndex
      - lookup(encoding) -> tuple of words, in word-list order
      - has_prefix(encoding) -> bool
    Internals:
      table: Dict[encoding, Tuple[word, ...]]
      prefixes: every proper prefix (including "") of every non-empty encoding
    Words without letters end up under the empty encoding. They are kept
    but never match, since the translator only looks up non-empty prefixes.
    """

    __slots__ = ("_table", "_prefixes", "_word_count")

    def __init__(self, table: Dict[str, List[str]]):
        self._table: Dict[str, Tuple[str, ...]] = {
            enc: tuple(words) for enc, words in table.items()
        }
        self._prefixes: Set[str] = set()
        self._word_count = 0
        for enc, words in self._table.items():
            self._word_count += len(words)
            for i in range(len(enc)):
                self._prefixes.add(enc[:i])

    # ---------- Public API ----------
    @classmethod
    def build(cls, words: Iterable[str]) -> "DictionaryIndex":
        """Index ``words`` by encoding. Order and duplicates are preserved."""
        table: Dict[str, List[str]] = {}
        for w in words:
            table.setdefault(word_to_encoding(w), []).append(w)
        return cls(table)

    def lookup(self, encoding: str) -> Tuple[str, ...]:
        return self._table.get(encoding, ())

    def has_prefix(self, encoding: str) -> bool:
        """True if some non-empty encoding in the index starts with (or is) ``encoding``."""
        if encoding in self._prefixes:
            return True
        return bool(encoding) and encoding in self._table

    @property
    def word_count(self) -> int:
        return self._word_count

    def __len__(self) -> int:
        return len(self._table)
