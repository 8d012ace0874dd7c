import pytest

from conftest import make_corpus
from errors import CorpusLoadError, EmptyCorpusError
from precompute import load_corpus, prepare


def test_prepare_builds_and_ranks(tmp_path, cycle_corpus):
    path = tmp_path / "corpus.txt"
    path.write_text(cycle_corpus, encoding="utf-8")

    graph = prepare(str(path))

    assert len(graph) == 3
    assert sum(graph.ranks().values()) == pytest.approx(1.0)


def test_prepare_with_custom_separator(tmp_path):
    path = tmp_path / "corpus.txt"
    path.write_text(make_corpus([("a", "x", ["b"]), ("b", "y", ["a"])], separator="@@END@@"))

    graph = prepare(str(path), separator="@@END@@")

    assert graph["a"].rank == pytest.approx(0.5)


def test_missing_file_is_a_load_error(tmp_path):
    with pytest.raises(CorpusLoadError) as excinfo:
        load_corpus(str(tmp_path / "nope.txt"))

    assert isinstance(excinfo.value.__cause__, OSError)


def test_empty_file_is_an_empty_corpus(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_text("")

    with pytest.raises(EmptyCorpusError):
        prepare(str(path))


def test_malformed_file_never_reaches_ranking(tmp_path):
    path = tmp_path / "bad.txt"
    path.write_text("PAGE\nhttp://a.example\n")

    with pytest.raises(CorpusLoadError):
        prepare(str(path))
