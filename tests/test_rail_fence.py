"""Tests for the rail fence traversal and cipher functions."""

from collections import Counter

import pytest

from app.core.exceptions import InvalidKeyError
from app.services.engines.transposition.rail_fence import (
    decrypt,
    encrypt,
    rail_lengths,
    rail_sequence,
    render_fence,
)


PLAINTEXT = "REDDITCOMRDAILYPROGRAMMER"
CIPHERTEXT = "RIMIRAREDTORALPORMEDCDYGM"


class TestRailSequence:
    """Test the zig-zag walk."""

    def test_bounce_four_rails(self):
        assert list(rail_sequence(10, 4)) == [0, 1, 2, 3, 2, 1, 0, 1, 2, 3]

    def test_bounce_two_rails(self):
        assert list(rail_sequence(5, 2)) == [0, 1, 0, 1, 0]

    def test_single_rail_stays_on_zero(self):
        assert list(rail_sequence(6, 1)) == [0] * 6

    def test_stops_before_reaching_bottom(self):
        """More rails than symbols ends the walk after the last symbol."""
        assert list(rail_sequence(3, 10)) == [0, 1, 2]

    def test_empty(self):
        assert list(rail_sequence(0, 3)) == []

    @pytest.mark.parametrize("rails", [2, 3, 4, 7])
    def test_period(self, rails):
        period = 2 * (rails - 1)
        walk = list(rail_sequence(5 * period, rails))
        assert walk[:period] == walk[period:2 * period]
        assert min(walk) == 0
        assert max(walk) == rails - 1

    def test_restartable(self):
        assert list(rail_sequence(12, 3)) == list(rail_sequence(12, 3))


class TestRailLengths:
    """Test the rail histogram."""

    def test_canonical(self):
        assert rail_lengths(len(PLAINTEXT), 3) == [7, 12, 6]

    def test_more_rails_than_symbols(self):
        assert rail_lengths(2, 5) == [1, 1]

    def test_padded(self):
        assert rail_lengths(2, 5, pad=True) == [1, 1, 0, 0, 0]
        assert rail_lengths(25, 3, pad=True) == [7, 12, 6]

    def test_huge_key_counts_reachable_rails_only(self):
        assert rail_lengths(3, 10**12) == [1, 1, 1]

    @pytest.mark.parametrize("length,rails", [(0, 1), (1, 1), (25, 3), (100, 7), (4, 9)])
    def test_sums_to_length(self, length, rails):
        counts = rail_lengths(length, rails, pad=True)
        assert len(counts) == rails
        assert sum(counts) == length


class TestEncrypt:
    """Test encryption."""

    def test_canonical(self):
        assert encrypt(PLAINTEXT, 3) == CIPHERTEXT

    def test_classic_example(self):
        assert encrypt("WEAREDISCOVEREDFLEEATONCE", 3) == "WECRLTEERDSOEEFEAOCAIVDEN"

    def test_single_rail_is_identity(self):
        assert encrypt(PLAINTEXT, 1) == PLAINTEXT

    def test_empty(self):
        for rails in (1, 2, 5):
            assert encrypt("", rails) == ""

    def test_key_longer_than_text(self):
        assert encrypt("ABC", 5) == "ABC"
        assert encrypt("HELLO", 4) == "HELOL"

    def test_huge_key(self):
        """Rails past the end of the text are never allocated."""
        assert encrypt("ABC", 10**12) == "ABC"
        assert encrypt([1, 2, 3, 4], 3 * 10**7) == [1, 2, 3, 4]
        assert encrypt("", 10**12) == ""

    def test_text_kept_verbatim(self):
        """Case, spaces and punctuation pass through untouched."""
        ciphertext = encrypt("Hi, there!", 2)
        assert ciphertext == "H,teei hr!"

    def test_permutation(self):
        for rails in range(1, 12):
            ciphertext = encrypt(PLAINTEXT, rails)
            assert len(ciphertext) == len(PLAINTEXT)
            assert Counter(ciphertext) == Counter(PLAINTEXT)

    def test_deterministic(self):
        assert encrypt(PLAINTEXT, 4) == encrypt(PLAINTEXT, 4)

    def test_list_of_symbols(self):
        assert encrypt([1, 2, 3, 4, 5], 2) == [1, 3, 5, 2, 4]

    def test_keeps_sequence_type(self):
        assert isinstance(encrypt(b"hello, world", 3), bytes)
        assert isinstance(encrypt(tuple("hello"), 2), tuple)

    def test_does_not_mutate_input(self):
        symbols = ["a", "b", "c", "d"]
        encrypt(symbols, 2)
        assert symbols == ["a", "b", "c", "d"]

    @pytest.mark.parametrize("key", [0, -1, -50])
    def test_invalid_key(self, key):
        with pytest.raises(InvalidKeyError):
            encrypt("ABC", key)

    @pytest.mark.parametrize("key", ["3", 2.0, None, True])
    def test_non_integer_key(self, key):
        with pytest.raises(InvalidKeyError):
            encrypt("ABC", key)


class TestDecrypt:
    """Test decryption."""

    def test_canonical(self):
        assert decrypt(CIPHERTEXT, 3) == PLAINTEXT

    def test_single_rail_is_identity(self):
        assert decrypt(CIPHERTEXT, 1) == CIPHERTEXT

    def test_empty(self):
        assert decrypt("", 4) == ""

    def test_key_longer_than_text(self):
        assert decrypt("HELOL", 4) == "HELLO"

    def test_huge_key(self):
        assert decrypt("ABC", 10**12) == "ABC"
        assert decrypt(b"xyz", 3 * 10**7) == b"xyz"

    @pytest.mark.parametrize("rails", [1, 2, 3, 4, 5, 6, 24, 25, 26, 40])
    def test_roundtrip(self, rails):
        assert decrypt(encrypt(PLAINTEXT, rails), rails) == PLAINTEXT

    def test_roundtrip_bytes(self):
        data = b"\x00hello, world\xff"
        for rails in range(1, 20):
            result = decrypt(encrypt(data, rails), rails)
            assert result == data
            assert isinstance(result, bytes)

    def test_roundtrip_list(self):
        symbols = [3, 1, 4, 1, 5, 9, 2, 6, 5, 3, 5]
        for rails in range(1, 15):
            assert decrypt(encrypt(symbols, rails), rails) == symbols

    def test_any_text_decodes(self):
        """Decryption never looks at where the ciphertext came from."""
        plaintext = decrypt("ABCDEFG", 3)
        assert len(plaintext) == 7
        assert encrypt(plaintext, 3) == "ABCDEFG"

    @pytest.mark.parametrize("key", [0, -1])
    def test_invalid_key(self, key):
        with pytest.raises(InvalidKeyError):
            decrypt(CIPHERTEXT, key)


class TestRenderFence:
    """Test the fence drawing."""

    def test_three_rails(self):
        assert render_fence("WEAREDISCOVERED", 3) == [
            "W...E...C...R..",
            ".E.R.D.S.O.E.E.",
            "..A...I...V...D",
        ]

    def test_rows_read_off_give_ciphertext(self):
        rows = render_fence(PLAINTEXT, 3, fill=" ")
        assert "".join(row.replace(" ", "") for row in rows) == CIPHERTEXT

    def test_empty_rails_drawn(self):
        assert render_fence("AB", 3) == ["A.", ".B", ".."]

    def test_invalid_key(self):
        with pytest.raises(InvalidKeyError):
            render_fence("ABC", 0)
