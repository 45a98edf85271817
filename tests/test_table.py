import pytest

from gemcalc import FINAL_TO_BASE, WEIGHTS, weight_of


def test_standard_alphabet():
    letters = "אבגדהוזחטיכלמנסעפצקרשת"
    expected = [1, 2, 3, 4, 5, 6, 7, 8, 9,
                10, 20, 30, 40, 50, 60, 70, 80, 90,
                100, 200, 300, 400]
    assert [weight_of(ch) for ch in letters] == expected


def test_final_letters_equal_base():
    assert len(FINAL_TO_BASE) == 5
    for final, base in FINAL_TO_BASE.items():
        assert weight_of(final) == weight_of(base)


@pytest.mark.parametrize(
    "ch,expected",
    [
        ("\u05C6", 50),  # nun hafukha
        ("\u05EF", 30),
        ("\u05F0", 12),  # double vav
        ("\u05F1", 16),
        ("\u05F2", 20),
        ("\uFB1F", 20),
        ("\uFB26", 40),
        ("\uFB3A", 20),
        ("\uFB43", 80),
        ("\uFB4F", 31),  # alef lamed
    ],
)
def test_historical_and_presentation_forms(ch, expected):
    assert weight_of(ch) == expected


@pytest.mark.parametrize("ch", ["a", "Z", "5", " ", ".", "ְ", "ﬞ", "﬩", "﬷", ""])
def test_unmapped_characters_weigh_zero(ch):
    assert weight_of(ch) == 0


def test_multi_character_string_weighs_zero():
    assert weight_of("אב") == 0


def test_all_weights_in_range():
    assert all(0 < w <= 400 for w in WEIGHTS.values())
    assert all(len(ch) == 1 for ch in WEIGHTS)


def test_presentation_block_bounds():
    presentation = [ord(ch) for ch in WEIGHTS if ord(ch) >= 0xFB00]
    assert min(presentation) == 64285
    assert max(presentation) == 64335


def test_table_is_read_only():
    with pytest.raises(TypeError):
        WEIGHTS["a"] = 1
    with pytest.raises(TypeError):
        del WEIGHTS["א"]
