from dataclasses import dataclass
import logging

from .hashing import probe_sequence
from .prime import next_prime
from .shared import printf_err, quote

logger = logging.getLogger(__name__)

INITIAL_BASE_SIZE = 50
MIN_BASE_SIZE = INITIAL_BASE_SIZE

# load limits, in percent of size
MAX_LOAD = 70
MIN_LOAD = 10


_debug_trace_probes = False


def set_debug_trace_probes(b: bool):
    global _debug_trace_probes
    _debug_trace_probes = b


class TableAllocationError(MemoryError):
    pass


class TableFreedError(Exception):
    pass


@dataclass(frozen=True)
class Empty:
    pass


@dataclass(frozen=True)
class Tombstone:
    pass


@dataclass
class Entry:
    key: str
    value: str


Slot = Empty | Tombstone | Entry

EMPTY = Empty()
TOMBSTONE = Tombstone()


@dataclass(frozen=True)
class NotFound:
    pass


def slot_repr(slot: Slot) -> str:
    match slot:
        case Empty():
            return "EMPTY"
        case Tombstone():
            return "TOMBSTONE"
        case Entry(key=key, value=value):
            return f"{quote(key)} -> {quote(value)}"
    raise Exception("not a slot", slot)


@dataclass
class HashTable:
    base_size: int
    size: int
    count: int
    buckets: list[Slot]

    def __init__(self, base_size: int = INITIAL_BASE_SIZE) -> None:
        self.base_size = max(base_size, MIN_BASE_SIZE)
        self.size = next_prime(self.base_size)
        self.count = 0
        self.buckets = _new_buckets(self.size)

    def __enter__(self) -> "HashTable":
        return self

    def __exit__(self, *exc_info) -> None:
        self.free()

    def __len__(self) -> int:
        return self.count

    def __contains__(self, key: str) -> bool:
        return self.search(key) != NotFound()

    def load(self) -> int:
        self._check_alive()
        return self.count * 100 // self.size

    def insert(self, key: str, value: str) -> bool:
        """
        Associate value with key, replacing any previous value.
        Returns True if the key was not in the table before.
        """
        _check_str("key", key)
        _check_str("value", value)
        if self.load() > MAX_LOAD:
            self.resize_up()

        entry = _new_entry(key, value)
        while True:
            is_new_key = _place(self.buckets, entry)
            if is_new_key is not None:
                break
            # every probed slot is taken: grow and drop tombstones
            logger.warning(
                "probe walk for %s exhausted in %d buckets, growing",
                quote(key),
                self.size,
            )
            self.resize_up()

        if is_new_key:
            self.count += 1
        return is_new_key

    def search(self, key: str) -> str | NotFound:
        _check_str("key", key)
        self._check_alive()

        for index in probe_sequence(key, self.size):
            slot = self.buckets[index]
            _trace("search", key, index, slot)
            match slot:
                case Empty():
                    return NotFound()
                case Entry(key=k, value=v) if k == key:
                    return v
        return NotFound()

    def delete(self, key: str) -> bool:
        """
        Remove key from the table. Returns False if it was not there;
        count is only touched for entries actually removed.
        """
        _check_str("key", key)
        if self.load() < MIN_LOAD:
            self.resize_down()

        removed = 0
        for index in probe_sequence(key, self.size):
            slot = self.buckets[index]
            _trace("delete", key, index, slot)
            match slot:
                case Empty():
                    break
                case Entry(key=k) if k == key:
                    self.buckets[index] = TOMBSTONE
                    removed += 1

        self.count -= removed
        return removed > 0

    def resize(self, base_size: int):
        """
        Rebuild the buckets for next_prime(base_size) slots, dropping
        tombstones. Requests below MIN_BASE_SIZE are ignored.
        """
        self._check_alive()
        if base_size < MIN_BASE_SIZE:
            return

        while True:
            size = next_prime(base_size)
            buckets = _new_buckets(size)
            count = 0
            for slot in self.buckets:
                if not isinstance(slot, Entry):
                    continue
                if _place(buckets, slot) is None:
                    break
                count += 1
            else:
                break
            logger.warning(
                "rehash into %d buckets hit an exhausted probe walk, doubling",
                size,
            )
            base_size *= 2

        logger.debug(
            "resize %d -> %d buckets, %d entries", self.size, size, count
        )
        self.base_size, self.size, self.buckets, self.count = (
            base_size,
            size,
            buckets,
            count,
        )

    def resize_up(self):
        self.resize(self.base_size * 2)

    def resize_down(self):
        self.resize(self.base_size // 2)

    def free(self):
        self.base_size = 0
        self.size = 0
        self.count = 0
        self.buckets = []

    def _check_alive(self):
        if self.size == 0:
            raise TableFreedError("hash table has been freed")


def new_table() -> HashTable:
    return HashTable(INITIAL_BASE_SIZE)


def free_table(table: HashTable):
    table.free()


def _new_buckets(size: int) -> list[Slot]:
    try:
        return [EMPTY] * size
    except MemoryError as e:
        raise TableAllocationError(f"cannot allocate {size} buckets") from e


def _new_entry(key: str, value: str) -> Entry:
    try:
        return Entry(key, value)
    except MemoryError as e:
        raise TableAllocationError(
            f"cannot allocate entry for {quote(key)}"
        ) from e


def _place(buckets: list[Slot], entry: Entry) -> bool | None:
    """
    Store entry at its key's slot, or at the first empty slot of the walk.
    Returns True for a new key, False for a replaced one and None when the
    walk ends without finding either.
    """
    for index in probe_sequence(entry.key, len(buckets)):
        slot = buckets[index]
        _trace("insert", entry.key, index, slot)
        match slot:
            case Empty():
                buckets[index] = entry
                return True
            case Entry(key=k) if k == entry.key:
                buckets[index] = entry
                return False
    return None


def _check_str(what: str, s: object):
    if not isinstance(s, str):
        raise TypeError(f"{what} must be str, not {type(s).__name__}")


def _trace(op: str, key: str, index: int, slot: Slot):
    if _debug_trace_probes:
        printf_err(
            "{0:s} {1:s} [{2:04d}] {3:s}\n", op, quote(key), index, slot_repr(slot)
        )
