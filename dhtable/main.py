import sys

from .debug import disassemble_probe, dump_table
from .shared import printf
from .table import free_table, new_table


def main(argv: list[str] | None = None):
    args = sys.argv[1:] if argv is None else argv

    pairs = []
    lookups = []
    for arg in args:
        if arg.startswith("?"):
            lookups.append(arg[1:])
            continue
        key, sep, value = arg.partition("=")
        if not sep:
            printf("Usage: dhtable [key=value | ?key ...]\n")
            sys.exit(64)
        pairs.append((key, value))

    table = new_table()
    for key, value in pairs:
        table.insert(key, value)
    if pairs:
        dump_table(table, "table")
    for key in lookups:
        disassemble_probe(table, key)
    free_table(table)

    sys.exit(0)


if __name__ == "__main__":
    main()
