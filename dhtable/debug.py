from .hashing import PRIME_1, PRIME_2, hash_string, probe_sequence
from .shared import printf, quote
from .table import Empty, Entry, HashTable, slot_repr


def dump_table(table: HashTable, name: str):
    printf("== {0:s} ==\n", name)
    printf(
        "base_size={0:d} size={1:d} count={2:d}\n",
        table.base_size,
        table.size,
        table.count,
    )

    for index, slot in enumerate(table.buckets):
        printf("{0:04d} {1:s}\n", index, slot_repr(slot))


def disassemble_probe(table: HashTable, key: str) -> int:
    """
    Print the walk a lookup of key takes through table, up to the first
    empty slot or matching entry. Returns the number of slots visited.
    """
    hash_a = hash_string(key, PRIME_1, table.size)
    hash_b = hash_string(key, PRIME_2, table.size)
    printf("== probe {0:s} ==\n", quote(key))
    printf("hash_a={0:d} step={1:d}\n", hash_a, hash_b + 1)

    visited = 0
    for attempt, index in enumerate(probe_sequence(key, table.size)):
        slot = table.buckets[index]
        visited += 1
        printf("{0:4d} [{1:04d}] {2:s}\n", attempt, index, slot_repr(slot))
        match slot:
            case Empty():
                break
            case Entry(key=k) if k == key:
                break
    return visited
