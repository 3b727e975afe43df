import sys
from typing import Any, TextIO


def fprintf(file: TextIO, format: str, *args: Any):
    file.write(format.format(*args))


def printf(format: str, *args: Any):
    fprintf(sys.stdout, format, *args)


def printf_err(format: str, *args: Any):
    fprintf(sys.stderr, format, *args)
