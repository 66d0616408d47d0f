import string
from typing import List, Sequence

from shortly.core.exceptions import InvalidArgument

# Base62 alphabet, lowercase first so that digit 1 is 'b'
DEFAULT_ALPHABET = string.ascii_lowercase + string.ascii_uppercase + string.digits


def validate_alphabet(alphabet: str) -> str:
    """Reject alphabets that cannot be decoded unambiguously."""
    if len(alphabet) < 2:
        raise InvalidArgument("alphabet must contain at least 2 characters")
    if len(set(alphabet)) != len(alphabet):
        raise InvalidArgument("alphabet characters must be unique")
    return alphabet


def to_digits(number: int, base: int) -> List[int]:
    """
    Convert a non-negative integer into its digits in the given base,
    most significant digit first. Zero yields [0], never an empty list.
    """
    if base < 2:
        raise InvalidArgument(f"base must be at least 2, got {base}")
    if number < 0:
        raise InvalidArgument(f"number must be non-negative, got {number}")
    digits = []
    while True:
        number, remainder = divmod(number, base)
        digits.append(remainder)
        if number == 0:
            break
    digits.reverse()
    return digits


def from_digits(digits: Sequence[int], base: int) -> int:
    """Rebuild the integer from its most-significant-first digits."""
    if base < 2:
        raise InvalidArgument(f"base must be at least 2, got {base}")
    if not digits:
        raise InvalidArgument("digit sequence is empty")
    n = 0
    for d in digits:
        if not 0 <= d < base:
            raise InvalidArgument(f"digit {d} out of range for base {base}")
        n = n * base + d
    return n


def encode_digits(digits: Sequence[int], alphabet: str) -> str:
    base = len(alphabet)
    out = []
    for d in digits:
        if not 0 <= d < base:
            raise InvalidArgument(f"digit {d} out of range for base {base}")
        out.append(alphabet[d])
    return ''.join(out)


def decode_code(code: str, alphabet: str) -> List[int]:
    """Map each character of a short code back to its index in the alphabet."""
    digits = []
    for ch in code:
        index = alphabet.find(ch)
        if index == -1:
            raise InvalidArgument(f"character {ch!r} is not in the alphabet")
        digits.append(index)
    return digits
