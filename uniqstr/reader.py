from dataclasses import dataclass
from typing import Iterator

from .validate import Filter, is_excluded

_WHITESPACE = b" \t\n\r\v\f"


@dataclass(frozen=True)
class ReadError:
    path: str
    reason: str


@dataclass
class Scanner:
    source: bytes
    filter: Filter
    start: int
    current: int


def read_file(path: str) -> bytes | ReadError:
    try:
        with open(path, "rb") as fp:
            return fp.read()
    except OSError as e:
        return ReadError(path=path, reason=e.strerror or str(e))


def read_tokens(path: str, filter: Filter) -> Iterator[str] | ReadError:
    # the whole file is read up front so a failed read never reaches a table
    source = read_file(path)
    if isinstance(source, ReadError):
        return source
    return scan_tokens(source, filter)


def scan_tokens(source: bytes, filter: Filter) -> Iterator[str]:
    """Split `source` on whitespace and excluded bytes."""
    scanner = Scanner(source=source, filter=filter, start=0, current=0)

    while True:
        skip_separators(scanner)
        if is_at_end(scanner):
            return

        scanner.start = scanner.current
        while not is_at_end(scanner) and not is_separator(scanner, peek(scanner)):
            advance(scanner)

        yield make_token(scanner)


def skip_separators(scanner: Scanner):
    while not is_at_end(scanner) and is_separator(scanner, peek(scanner)):
        advance(scanner)


def is_separator(scanner: Scanner, c: int) -> bool:
    return c in _WHITESPACE or is_excluded(scanner.filter, c)


def peek(scanner: Scanner) -> int:
    return scanner.source[scanner.current]


def advance(scanner: Scanner) -> int:
    scanner.current += 1
    return scanner.source[scanner.current - 1]


def is_at_end(scanner: Scanner) -> bool:
    return scanner.current >= len(scanner.source)


def make_token(scanner: Scanner) -> str:
    lexeme = scanner.source[scanner.start : scanner.current]
    return lexeme.decode("utf-8", "surrogateescape")
