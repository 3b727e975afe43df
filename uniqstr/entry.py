from dataclasses import dataclass

HASH_MAGIC = 37


@dataclass
class Entry:
    key: str | None
    count: int

    @classmethod
    def empty(cls):
        return Entry(None, 0)

    def is_empty(self) -> bool:
        return self.key is None


def key_bytes(key: str) -> bytes:
    # surrogateescape keeps undecodable input bytes round-trippable
    try:
        return key.encode("utf-8", "surrogateescape")
    except UnicodeEncodeError:
        # lone surrogates outside U+DC80..U+DCFF
        return key.encode("utf-8", "surrogatepass")


def hash_string(key: str, capacity: int, magic: int = HASH_MAGIC) -> int:
    """Polynomial rolling hash reduced into [0, capacity)."""
    hash = 0
    for byte in key_bytes(key):
        hash = (hash * magic + byte) % capacity
    return hash
