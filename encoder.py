# encoder.py
# Fixed letter -> digit table and the helpers that turn words and raw phone
# numbers into digit strings.

from typing import Dict


class InvalidCharacterError(ValueError):
    """Raised when a character cannot be encoded as a digit."""


LETTER_DIGITS: Dict[str, str] = {
    'E': '0',
    **dict.fromkeys(list("JNQ"), '1'),
    **dict.fromkeys(list("RWX"), '2'),
    **dict.fromkeys(list("DSY"), '3'),
    **dict.fromkeys(list("FT"), '4'),
    **dict.fromkeys(list("AM"), '5'),
    **dict.fromkeys(list("CIV"), '6'),
    **dict.fromkeys(list("BKU"), '7'),
    **dict.fromkeys(list("LOP"), '8'),
    **dict.fromkeys(list("GHZ"), '9'),
}

# Reverse view: digit -> letters in alphabetical order
DIGIT_LETTERS: Dict[str, str] = {}
for _letter, _digit in sorted(LETTER_DIGITS.items()):
    DIGIT_LETTERS[_digit] = DIGIT_LETTERS.get(_digit, "") + _letter
del _letter, _digit

DIGITS = frozenset("0123456789")


def char_to_digit(c: str) -> str:
    """Return the digit for letter ``c`` (case-insensitive).

    Only the 26 ASCII letters are accepted; anything else raises
    ``InvalidCharacterError``.
    """
    digit = LETTER_DIGITS.get(c.upper()) if len(c) == 1 and c.isascii() else None
    if digit is None:
        raise InvalidCharacterError(f"Invalid char: {c!r}")
    return digit


def _is_letter(c: str) -> bool:
    return c.isascii() and c.isalpha()


def word_to_encoding(word: str) -> str:
    """Encode ``word`` as digits, one per letter; non-letters are skipped."""
    return "".join(char_to_digit(c) for c in word if _is_letter(c))


def number_to_digits(raw: str) -> str:
    """
    Reduce a raw phone number to its digit string. Digits are kept, letters
    are encoded like dictionary words and everything else is dropped.
    """
    out = []
    for c in raw:
        if c in DIGITS:
            out.append(c)
        elif _is_letter(c):
            out.append(char_to_digit(c))
    return "".join(out)


def is_digit_string(s: str) -> bool:
    return all(c in DIGITS for c in s)
