from .entry import Entry
from .shared import printf


def dump_slots(slots: tuple[Entry, ...], name: str):
    printf("== {0:s} ==\n", name)

    for index, entry in enumerate(slots):
        dump_slot(index, entry)


def dump_slot(index: int, entry: Entry):
    printf("{0:04d} ", index)
    if entry.key is None:
        printf("   |\n")
    else:
        printf("{0:4d} {1!r}\n", entry.count, entry.key)


def trace_growth(old_capacity: int, new_capacity: int, count: int):
    printf(
        "grow {0:d} -> {1:d} ({2:d} live)\n", old_capacity, new_capacity, count
    )
