from hypothesis import given
from hypothesis import strategies as st

from delverkit.strings import capitalize


def test_empty_string():
    assert capitalize("") == ""


def test_first_letter_upper():
    assert capitalize("hello world") == "Hello world"


def test_rest_untouched():
    assert capitalize("mIxEd") == "MIxEd"


def test_multi_character_uppercase():
    assert capitalize("ßa") == "SSa"


@given(st.text(min_size=1))
def test_tail_preserved(s):
    result = capitalize(s)
    head = s[0].upper()
    assert result.startswith(head)
    assert result[len(head):] == s[1:]