from dataclasses import dataclass
from typing import Iterable

from .entry import key_bytes

MIN_STRING_SIZE = 1
MAX_STRING_SIZE = 64

BYTE_RANGE = 256

COMMON_PUNCTUATION = b",*;.:([])"


def is_acceptable(s: str) -> bool:
    """True if `s` is between MIN_STRING_SIZE and MAX_STRING_SIZE bytes long."""
    return MIN_STRING_SIZE <= len(key_bytes(s)) <= MAX_STRING_SIZE


@dataclass(frozen=True)
class Filter:
    excluded: tuple[bool, ...]


def build_filter(excluded: bytes | Iterable[int]) -> Filter:
    lookup = [False] * BYTE_RANGE
    for byte in excluded:
        if not 0 <= byte < BYTE_RANGE:
            raise ValueError(f"Not a byte: {byte!r}")
        lookup[byte] = True
    return Filter(excluded=tuple(lookup))


def is_excluded(filter: Filter, byte: int) -> bool:
    return 0 <= byte < BYTE_RANGE and filter.excluded[byte]
