from dataclasses import dataclass, field
from typing import Iterator

from .debug import dump_slots, trace_growth
from .entry import HASH_MAGIC, Entry, hash_string

TABLE_INITIAL_CAPACITY = 11
TABLE_MAX_LOAD = 0.75
TABLE_GROWTH_FACTOR = 2


_debug_trace_growth = False


def set_debug_trace_growth(b: bool):
    global _debug_trace_growth
    _debug_trace_growth = b


@dataclass(frozen=True)
class TableConfig:
    max_load: float = TABLE_MAX_LOAD
    growth_factor: int = TABLE_GROWTH_FACTOR
    magic: int = HASH_MAGIC

    def __post_init__(self):
        if not 0 < self.max_load <= 1:
            raise ValueError(f"max_load should be in (0, 1], got {self.max_load}")
        if self.growth_factor < 2:
            raise ValueError(
                f"growth_factor should be at least 2, got {self.growth_factor}"
            )
        if self.magic < 1:
            raise ValueError(f"magic should be positive, got {self.magic}")


@dataclass(frozen=True)
class Inserted:
    pass


@dataclass(frozen=True)
class Incremented:
    pass


@dataclass(frozen=True)
class Grown:
    capacity: int


@dataclass(frozen=True)
class TableFull:
    pass


@dataclass(frozen=True)
class OutOfMemory:
    pass


@dataclass(frozen=True)
class NotFound:
    pass


@dataclass(frozen=True)
class InvalidCapacity:
    capacity: int


UpsertOk = Inserted | Incremented


class TableDestroyedError(Exception):
    pass


@dataclass
class Table:
    """Open-addressing map from string key to occurrence count.

    Collisions are resolved by linear probing. There is no deletion, so a
    slot is either empty or holds a live key. The slot sequence is replaced
    wholesale on growth, never patched in place.
    """

    count: int
    slots: tuple[Entry, ...]
    config: TableConfig = field(default_factory=TableConfig)
    destroyed: bool = False

    def __post_init__(self):
        if len(self.slots) < 1:
            raise ValueError("Table should have at least one slot")
        if not 0 <= self.count <= len(self.slots):
            raise ValueError(
                f"count should be in [0, {len(self.slots)}], got {self.count}"
            )

    @property
    def capacity(self) -> int:
        return len(self.slots)

    def __len__(self) -> int:
        return self.count

    def __contains__(self, key: str) -> bool:
        return not isinstance(self.count_of(key), NotFound)

    def load_factor(self) -> float:
        self._check_live()
        return self.count / self.capacity

    def upsert(self, key: str) -> UpsertOk | TableFull | OutOfMemory:
        """Insert `key` with a count of 1, or bump the count if present.

        The caller is trusted to pass an acceptable key; see
        `validate.is_acceptable`.
        """
        self._check_live()

        while self.count + 1 > self.capacity * self.config.max_load:
            grown = self.grow()
            if isinstance(grown, OutOfMemory):
                return grown

        entry = self.find_entry(self.slots, key)
        if entry is None:
            return TableFull()

        if entry.is_empty():
            entry.key = key
            entry.count = 1
            self.count += 1
            return Inserted()

        entry.count += 1
        return Incremented()

    def count_of(self, key: str) -> int | NotFound:
        self._check_live()
        if self.count == 0:
            return NotFound()

        entry = self.find_entry(self.slots, key)
        if entry is None or entry.is_empty():
            return NotFound()
        return entry.count

    def entries(self) -> Iterator[tuple[str, int]]:
        self._check_live()
        return (
            (entry.key, entry.count) for entry in self.slots if entry.key is not None
        )

    def grow(self) -> Grown | OutOfMemory:
        self._check_live()
        capacity = self.capacity * self.config.growth_factor
        try:
            new_slots = _new_slots(capacity)
        except MemoryError:
            return OutOfMemory()

        for entry in self.slots:
            if entry.key is None:
                continue

            dest = self.find_entry(new_slots, entry.key)
            # the new sequence is larger than the old live count
            assert dest is not None and dest.is_empty()
            dest.key = entry.key
            dest.count = entry.count

        old_capacity = self.capacity
        self.slots = new_slots

        if _debug_trace_growth:
            trace_growth(old_capacity, capacity, self.count)
            dump_slots(self.slots, "grow")

        return Grown(capacity)

    def find_entry(self, slots: tuple[Entry, ...], key: str) -> Entry | None:
        """Follow the probe sequence of `key` through `slots`.

        Returns the slot holding `key`, the first empty slot on the way, or
        None when every slot was visited without finding either.
        """
        capacity = len(slots)
        index = hash_string(key, capacity, self.config.magic)

        for _ in range(capacity):
            entry = slots[index]
            if entry.key is None or entry.key == key:
                return entry

            index = (index + 1) % capacity

        return None

    def destroy(self):
        self._check_live()
        self.count = 0
        self.slots = tuple()
        self.destroyed = True

    def _check_live(self):
        if self.destroyed:
            raise TableDestroyedError("Table used after destroy")


def _new_slots(capacity: int) -> tuple[Entry, ...]:
    return tuple(Entry.empty() for _ in range(capacity))


def create(
    capacity: int = TABLE_INITIAL_CAPACITY, config: TableConfig | None = None
) -> Table | InvalidCapacity | OutOfMemory:
    if capacity < 1:
        return InvalidCapacity(capacity)

    try:
        slots = _new_slots(capacity)
    except MemoryError:
        return OutOfMemory()

    return Table(count=0, slots=slots, config=config or TableConfig())
