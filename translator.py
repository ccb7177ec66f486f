from enum import Enum
from typing import Iterable, Iterator, List, NamedTuple, Tuple

from dictionary import DictionaryIndex
from encoder import InvalidCharacterError, is_digit_string, number_to_digits, word_to_encoding


class SegmentKind(Enum):
    WORD = "W"
    DIGIT = "D"


class Segment(NamedTuple):
    """One piece of a solution: a dictionary word or a lone digit."""

    kind: SegmentKind
    text: str
    encoding: str

    @classmethod
    def word(cls, text: str, encoding: str) -> "Segment":
        return cls(SegmentKind.WORD, text, encoding)

    @classmethod
    def digit(cls, digit: str) -> "Segment":
        return cls(SegmentKind.DIGIT, digit, digit)

    @property
    def is_digit(self) -> bool:
        return self.kind is SegmentKind.DIGIT

    def __str__(self):
        return self.text


Solution = Tuple[Segment, ...]


def _last_is_digit(segments: List[Segment]) -> bool:
    return bool(segments) and segments[-1].is_digit


# ============== Search ==============
def _search(digits: str, start: int, segments: List[Segment], index: DictionaryIndex) -> Iterator[Solution]:
    if start == len(digits):
        yield tuple(segments)
        return

    found_word = False
    key = ""
    for i in range(start, len(digits)):
        key += digits[i]
        # Neither this key nor any longer one can match
        if not index.has_prefix(key):
            break
        words = index.lookup(key)
        if words:
            found_word = True
            for w in words:
                segments.append(Segment.word(w, key))
                yield from _search(digits, i + 1, segments, index)
                segments.pop()

    # Digits only fill positions no word can start at, never two in a row
    if not found_word and not _last_is_digit(segments):
        segments.append(Segment.digit(digits[start]))
        yield from _search(digits, start + 1, segments, index)
        segments.pop()


def translate(digits: str, index: DictionaryIndex) -> Iterator[Solution]:
    """
    Yield every decomposition of ``digits`` into dictionary words and single
    digits, depth first.

    At each position words come before the digit fallback, and words sharing
    an encoding come in word-list order. A digit is only used where no word
    matches any prefix starting at that position, and never directly after
    another digit. Each call starts a fresh search, so the same inputs always
    give the same sequence.

    ``digits`` must already be filtered (see ``encoder.number_to_digits``);
    anything other than 0-9 raises ``InvalidCharacterError``.

    Each segment adds one level of recursion, so numbers whose solutions
    run past the interpreter recursion limit (about 1000 segments) raise
    ``RecursionError``.
    """
    if not is_digit_string(digits):
        raise InvalidCharacterError(f"Not a digit string: {digits!r}")
    if not digits:
        return
    yield from _search(digits, 0, [], index)


def translate_number(number: str, index: DictionaryIndex) -> Iterator[Tuple[str, List[str]]]:
    """Yield ``(number, [segment text, ...])`` for each solution of a raw phone number."""
    for solution in translate(number_to_digits(number), index):
        yield number, [str(seg) for seg in solution]


def translate_numbers(numbers: Iterable[str], index: DictionaryIndex) -> Iterator[Tuple[str, List[str]]]:
    for number in numbers:
        yield from translate_number(number, index)


def format_solution(number: str, segments: Iterable[str]) -> str:
    return f"{number}: {' '.join(segments)}"


def solution_covers(digits: str, solution: Solution) -> bool:
    """True if the segments' encodings, joined, spell out ``digits`` exactly."""
    for seg in solution:
        if seg.kind is SegmentKind.WORD and word_to_encoding(seg.text) != seg.encoding:
            return False
        if seg.is_digit and len(seg.encoding) != 1:
            return False
    return "".join(seg.encoding for seg in solution) == digits
