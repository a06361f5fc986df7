from dhtable.hashing import PRIME_1, PRIME_2, hash_string, probe_sequence


def test_hash_string():
    # single byte reduces to the byte itself mod m
    assert hash_string("a", PRIME_1, 53) == 97 % 53
    assert hash_string("a", PRIME_2, 53) == 44

    assert hash_string("ab", PRIME_2, 53) == 11
    assert hash_string("ab", PRIME_1, 53) == 32

    # should hash the utf-8 bytes
    assert hash_string("é", PRIME_1, 1000) == (195 * 131 + 169) % 1000

    assert hash_string("", PRIME_1, 53) == 0


def test_hash_string_matches_polynomial():
    for s in ["hello", "double hashing", "x" * 40]:
        data = s.encode()
        n = len(data)
        expected = sum(PRIME_1 ** (n - i - 1) * b for i, b in enumerate(data)) % 101
        assert hash_string(s, PRIME_1, 101) == expected


def test_hash_string_range():
    for i in range(200):
        assert 0 <= hash_string(f"key{i}", PRIME_1, 53) < 53
        assert 0 <= hash_string(f"key{i}", PRIME_2, 7) < 7


def test_probe_sequence():
    seq = list(probe_sequence("a", 53))
    # hash_a is 44, step is hash_b + 1 == 45
    assert seq[:3] == [44, 36, 28]
    assert seq == [(44 + i * 45) % 53 for i in range(53)]

    # prime modulus with a non-zero step visits every bucket once
    assert sorted(seq) == list(range(53))


def test_probe_sequence_degenerate_step():
    # "4" is byte 52: hash_b + 1 == 53 == size, the step wraps to 0
    assert list(probe_sequence("4", 53)) == [52] * 53
    assert list(probe_sequence("i", 53)) == [52] * 53
