import sys
from typing import Iterable, TextIO

from .counter import CountOk, count_tokens
from .reader import ReadError, read_tokens, scan_tokens
from .shared import fprintf, printf, printf_err
from .table import (
    TABLE_INITIAL_CAPACITY,
    InvalidCapacity,
    OutOfMemory,
    Table,
    TableFull,
    create,
)
from .validate import COMMON_PUNCTUATION, build_filter

EX_OK = 0
EX_USAGE = 64
EX_NOINPUT = 66
EX_SOFTWARE = 70
EX_IOERR = 74


def write_report(table: Table, file: TextIO):
    for key, count in table.entries():
        fprintf(file, "{0:s}: {1:d}\n", key, count)

    fprintf(file, "Total number of strings: {0:d}\n", table.count)
    fprintf(file, "Current size of the hash table: {0:d}\n", table.capacity)


def count_all(tokens: Iterable[str]) -> Table | int:
    table = create(TABLE_INITIAL_CAPACITY)
    if isinstance(table, (InvalidCapacity, OutOfMemory)):
        printf_err("Error: Could not allocate memory for hash table.\n")
        return EX_SOFTWARE

    result = count_tokens(table, tokens)
    match result:
        case CountOk():
            return table
        case TableFull():
            printf_err("Error: Could not add string to hash table.\n")
        case OutOfMemory():
            printf_err("Error: Could not allocate memory to grow hash table.\n")

    table.destroy()
    return EX_SOFTWARE


def run_stdin() -> int:
    excluded = build_filter(COMMON_PUNCTUATION)
    table = count_all(scan_tokens(sys.stdin.buffer.read(), excluded))
    if isinstance(table, int):
        return table

    write_report(table, sys.stdout)
    table.destroy()
    return EX_OK


def run_file(filepath: str, output: str | None = None) -> int:
    excluded = build_filter(COMMON_PUNCTUATION)
    tokens = read_tokens(filepath, excluded)
    if isinstance(tokens, ReadError):
        printf_err(
            "Error: Could not open file {0:s}: {1:s}\n", tokens.path, tokens.reason
        )
        return EX_NOINPUT

    table = count_all(tokens)
    if isinstance(table, int):
        return table

    try:
        if output is None:
            write_report(table, sys.stdout)
        else:
            with open(output, "w", encoding="utf-8", errors="surrogateescape") as fp:
                write_report(table, fp)
    except OSError as e:
        printf_err(
            "Error: Could not write to {0:s}: {1:s}\n", output or "stdout", str(e)
        )
        return EX_IOERR
    finally:
        table.destroy()

    return EX_OK


def main():
    match len(sys.argv):
        case 1:
            sys.exit(run_stdin())
        case 2:
            sys.exit(run_file(sys.argv[1]))
        case 3:
            sys.exit(run_file(sys.argv[1], sys.argv[2]))
        case _:
            printf("Usage: uniqstr [path [output]]\n")
            sys.exit(EX_USAGE)
