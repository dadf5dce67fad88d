import pytest

from backends import CorpusLoadError, load_corpus


def test_load_corpus_keeps_text_verbatim(docs_file):
    corpus = load_corpus(docs_file)

    assert corpus.text == docs_file.read_bytes().decode("utf-8")
    assert corpus.source == str(docs_file)


def test_lines_split_on_newline_only(docs_file):
    corpus = load_corpus(docs_file)

    assert corpus.lines == (
        "Svelte is reactive",
        "React is a library",
        "SVELTE 5 adds runes\r",
        "last line",
        "",
    )


def test_missing_file_is_fatal(tmp_path):
    with pytest.raises(CorpusLoadError, match="not found"):
        load_corpus(tmp_path / "missing.txt")


def test_directory_is_rejected(tmp_path):
    with pytest.raises(CorpusLoadError):
        load_corpus(tmp_path)


def test_invalid_utf8_is_fatal(tmp_path):
    path = tmp_path / "binary.txt"
    path.write_bytes(b"\xff\xfe\xfa")

    with pytest.raises(CorpusLoadError) as exc_info:
        load_corpus(path)
    assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)


def test_corpus_is_immutable(docs_file):
    corpus = load_corpus(docs_file)

    with pytest.raises(AttributeError):
        corpus.text = "changed"
