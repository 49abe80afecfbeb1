import os

import pytest

from docindex.index import DocumentFailure, StandardIndex
from docindex.profiler import Profiler
from docindex.text_processor import ExtractionError


def fake_extractor(texts):
    def extract(path):
        text = texts[path]
        if isinstance(text, Exception):
            raise text
        return text
    return extract


def test_empty_document_is_indexed(docs_dir):
    index = StandardIndex(docs_dir).build_index()

    assert index.doc_count == 2
    assert index.doc_term_freqs == {
        os.path.join(docs_dir, "empty.xhtml"): {},
        os.path.join(docs_dir, "go.xhtml"): {"GO": 3},
    }
    assert index.failures == []


def test_index_documents_with_custom_extractor():
    extractor = fake_extractor({"a": "", "b": "go go go"})
    index = StandardIndex(extractor=extractor).index_documents(["a", "b"])

    assert index.doc_term_freqs == {"a": {}, "b": {"GO": 3}}


def test_failed_document_is_skipped_and_reported():
    extractor = fake_extractor({
        "good": "A cat sat",
        "bad": ExtractionError("bad", "parse error"),
        "later": "cat",
    })
    index = StandardIndex(extractor=extractor).index_documents(["good", "bad", "later"])

    assert index.documents == ["good", "later"]
    assert index.failures == [DocumentFailure("bad", "parse error")]


def test_failed_document_indexed_empty_with_empty_policy():
    extractor = fake_extractor({"bad": ExtractionError("bad", "parse error"), "ok": "x"})
    index = StandardIndex(extractor=extractor, on_error="empty").index_documents(["bad", "ok"])

    assert index.doc_term_freqs == {"bad": {}, "ok": {"X": 1}}
    assert [failure.path for failure in index.failures] == ["bad"]


def test_unexpected_error_does_not_stop_indexing():
    extractor = fake_extractor({"boom": RuntimeError("boom"), "ok": "fine"})
    index = StandardIndex(extractor=extractor).index_documents(["boom", "ok"])

    assert index.documents == ["ok"]
    assert index.failures[0].error == "RuntimeError: boom"


def test_unreadable_file_in_directory(docs_dir, write_doc):
    bad = os.path.join(docs_dir, "bad.xhtml")
    with open(bad, "wb") as f:
        f.write(b"\xff\xfe\xfa")

    index = StandardIndex(docs_dir).build_index()

    assert index.doc_count == 2
    assert [failure.path for failure in index.failures] == [bad]


def test_invalid_failure_policy():
    with pytest.raises(ValueError):
        StandardIndex(on_error="abort")


def test_add_document_overwrites():
    index = StandardIndex()
    index.add_document({"A": 1}, "doc")
    index.add_document({"B": 2}, "doc")
    assert index.doc_term_freqs == {"doc": {"B": 2}}


def test_build_requires_documents_dir():
    with pytest.raises(ValueError):
        StandardIndex().build_index()


def test_missing_directory_is_fatal(tmp_path):
    with pytest.raises(FileNotFoundError):
        StandardIndex(str(tmp_path / "nope")).build_index()


def test_subdirectories_are_not_indexed(docs_dir):
    os.mkdir(os.path.join(docs_dir, "nested"))
    with open(os.path.join(docs_dir, "nested", "deep.xhtml"), "w") as f:
        f.write("<p>deep</p>")

    index = StandardIndex(docs_dir).build_index()
    assert index.doc_count == 2
    assert index.failures == []


def test_file_extension_filter(docs_dir, write_doc):
    write_doc("notes.txt", "ignored", raw=True)

    filtered = StandardIndex(docs_dir, file_extensions=[".XHTML"]).build_index()
    unfiltered = StandardIndex(docs_dir).build_index()

    assert filtered.doc_count == 2
    assert unfiltered.doc_count == 3


def test_queries_and_statistics():
    extractor = fake_extractor({"a": "A cat sat on the MAT. A CAT.", "b": "go go go", "c": ""})
    index = StandardIndex(extractor=extractor).index_documents(["a", "b", "c"])

    assert index.get_term_freq("CAT", "a") == 2
    assert index.get_term_freq("CAT", "b") == 0
    assert index.get_term_freq("CAT", "missing") == 0
    assert index.get_term_freqs("c") == {}
    assert index.get_term_freqs("missing") is None
    assert index.vocab_size == 8
    assert index.get_most_frequent_terms(1) == [("GO", 3)]

    lengths, avg = index.get_document_lengths()
    assert lengths == {"a": 10, "b": 3, "c": 0}
    assert avg == pytest.approx(13 / 3)

    stats = index.get_statistics()
    assert stats["document_count"] == 3
    assert stats["vocabulary_size"] == 8
    assert stats["total_tokens"] == 13
    assert stats["empty_documents"] == 1
    assert stats["max_doc_length"] == 10
    assert stats["min_doc_length"] == 0
    assert stats["max_term_freq"] == 3
    assert stats["failed_documents"] == 0


def test_statistics_of_empty_index():
    stats = StandardIndex().get_statistics()
    assert stats["document_count"] == 0
    assert stats["avg_doc_length"] == 0
    assert stats["avg_term_freq"] == 0


def test_profiler_records_build_time(docs_dir):
    profiler = Profiler()
    StandardIndex(docs_dir, profiler=profiler).build_index()
    assert "Sequential Index Building" in profiler.timings


def test_save_and_load(docs_dir, tmp_path):
    index = StandardIndex(docs_dir).build_index()
    index_file = str(tmp_path / "index.json")
    index.save(index_file)

    loaded = StandardIndex.load(index_file)
    assert loaded.doc_term_freqs == index.doc_term_freqs
    assert loaded.doc_count == 2
