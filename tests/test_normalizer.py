import pytest

from docindex.text_processor import normalize


def test_upper_cases_ascii():
    assert normalize("glClear") == "GLCLEAR"
    assert normalize("gl4") == "GL4"


def test_symbols_and_digits_unchanged():
    assert normalize(".") == "."
    assert normalize("2025") == "2025"


def test_non_ascii_letters_pass_through():
    assert normalize("héllo") == "HéLLO"
    assert normalize("straße") == "STRAßE"
    assert normalize("ǆ") == "ǆ"


@pytest.mark.parametrize("token", ["cat", "MAT", "MiXeD9", "héllo", "ß", ".", "١٢"])
def test_idempotent(token):
    assert normalize(normalize(token)) == normalize(token)
