from dataclasses import dataclass
from typing import Callable, Iterable

from .table import OutOfMemory, Table, TableFull
from .validate import is_acceptable


@dataclass(frozen=True)
class CountOk:
    accepted: int
    rejected: int


CountResult = CountOk | TableFull | OutOfMemory


def count_tokens(
    table: Table,
    tokens: Iterable[str],
    accept: Callable[[str], bool] = is_acceptable,
) -> CountResult:
    """Offer every acceptable token to `table`, stopping at the first failure."""
    accepted = 0
    rejected = 0
    for token in tokens:
        if not accept(token):
            rejected += 1
            continue

        result = table.upsert(token)
        if isinstance(result, (TableFull, OutOfMemory)):
            return result
        accepted += 1

    return CountOk(accepted=accepted, rejected=rejected)
