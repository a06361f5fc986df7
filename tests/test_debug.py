from dhtable.debug import disassemble_probe, dump_table
from dhtable.table import new_table


def test_dump_table(capsys):
    t = new_table()
    t.insert("a", "1")
    t.insert("b", "2")
    t.delete("b")
    dump_table(t, "t")

    out = capsys.readouterr().out
    lines = out.splitlines()
    assert lines[0] == "== t =="
    assert lines[1] == "base_size=50 size=53 count=1"
    # one line per bucket
    assert len(lines) == 2 + 53
    assert "0000 EMPTY" in lines
    assert "0044 'a' -> '1'" in lines
    assert "0045 TOMBSTONE" in lines


def test_dump_table_shortens_long_strings(capsys):
    t = new_table()
    t.insert("a", "x" * 100)
    dump_table(t, "long")

    out = capsys.readouterr().out
    assert "'a' -> '" + "x" * 29 + "...'" in out
    assert "x" * 100 not in out


def test_disassemble_probe(capsys):
    t = new_table()
    t.insert("!", "bang")
    t.insert("V", "vee")

    assert disassemble_probe(t, "V") == 2
    out = capsys.readouterr().out
    assert out == (
        "== probe 'V' ==\n"
        "hash_a=33 step=34\n"
        "   0 [0033] '!' -> 'bang'\n"
        "   1 [0014] 'V' -> 'vee'\n"
    )

    # should stop at the first empty bucket
    assert disassemble_probe(t, "absent") >= 1
    out = capsys.readouterr().out
    assert out.endswith("EMPTY\n")
