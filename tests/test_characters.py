import string

import pytest

from randkit import (
    GeneratorConfigError,
    characters,
    digits,
    integers,
    letters,
    letters_or_digits,
    lowercase_letters,
    uppercase_letters,
)
from randkit.characters import ascii_chars, latin1_chars

from fakes import seeded


@pytest.mark.parametrize(
    "gen,alphabet",
    [
        (digits, string.digits),
        (uppercase_letters, string.ascii_uppercase),
        (lowercase_letters, string.ascii_lowercase),
        (letters, string.ascii_letters),
        (letters_or_digits, string.ascii_letters + string.digits),
    ],
)
def test_presets_stay_in_alphabet(gen, alphabet: str) -> None:
    source = seeded(17)
    assert all(gen.run(source) in alphabet for _ in range(200))


def test_ascii_and_latin1_ranges() -> None:
    source = seeded(2)
    assert all(ord(ascii_chars.run(source)) < 0x80 for _ in range(100))
    assert all(ord(latin1_chars.run(source)) < 0x100 for _ in range(100))


def test_surrogates_skipped() -> None:
    gen = characters("\ud7ff", "\ue000")
    source = seeded(3)
    assert {gen.run(source) for _ in range(20)} <= {"\ud7ff", "\ue000"}


def test_bounds_must_be_single_characters() -> None:
    with pytest.raises(GeneratorConfigError):
        characters("ab", "z")


def test_inverted_bounds_fail() -> None:
    with pytest.raises(GeneratorConfigError):
        characters("z", "a")


def test_identifier_like_strings() -> None:
    gen = letters.zip(letters_or_digits.collection(integers(0, 8)), transform=lambda h, t: h + "".join(t))
    source = seeded(8)
    for _ in range(20):
        word = gen.run(source)
        assert word.isalnum()
        assert word[0].isalpha()
        assert 1 <= len(word) <= 9
