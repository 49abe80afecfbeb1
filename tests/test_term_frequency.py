import pytest

from docindex.text_processor import (DocumentResult, ExtractionError, Lexer,
                                     build_term_freqs, process_document)


def test_scenario_counts():
    term_freqs = build_term_freqs("A cat sat on the MAT. A CAT.")
    assert term_freqs == {"A": 2, "CAT": 2, "SAT": 1, "ON": 1, "THE": 1, "MAT": 1, ".": 2}


def test_empty_text_gives_empty_table():
    assert build_term_freqs("") == {}
    assert build_term_freqs(" \n\t ") == {}


@pytest.mark.parametrize("text", [
    "A cat sat on the MAT. A CAT.",
    "glClear(GL_COLOR_BUFFER_BIT); glClear(0);",
    "go go go",
])
def test_counts_sum_to_token_count(text):
    term_freqs = build_term_freqs(text)
    assert sum(term_freqs.values()) == len(list(Lexer(text)))
    assert all(count >= 1 for count in term_freqs.values())


def test_case_variants_share_a_term():
    assert build_term_freqs("Go GO go gO") == {"GO": 4}


def test_process_document_success():
    result = process_document("doc-1", lambda path: "go go go")
    assert result == DocumentResult("doc-1", term_freqs={"GO": 3})
    assert result.ok
    assert type(result.term_freqs) is dict


def test_process_document_extraction_failure():
    def failing(path):
        raise ExtractionError(path, "FileNotFoundError: no such file")

    result = process_document("missing.xhtml", failing)
    assert not result.ok
    assert result.term_freqs is None
    assert result.path == "missing.xhtml"
    assert "no such file" in result.error


def test_process_document_unexpected_failure_is_contained():
    def broken(path):
        raise RuntimeError("boom")

    result = process_document("doc", broken)
    assert not result.ok
    assert result.error == "RuntimeError: boom"
