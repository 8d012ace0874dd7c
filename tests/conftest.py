import pytest

from indexer import build_graph


def make_corpus(records, separator="PAGE"):
    """records: iterable of (url, body, [links])."""
    lines = []
    for url, body, links in records:
        lines.append(separator)
        lines.append(url)
        lines.append(body)
        lines.extend(links)
    return "\n".join(lines) + "\n"


@pytest.fixture()
def cycle_corpus():
    return make_corpus([
        ("http://a.example", "Apples, and more apples!", ["http://b.example"]),
        ("http://b.example", "Bananas - ripe.", ["http://c.example"]),
        ("http://c.example", "Cherries? Yes: cherries", ["http://a.example"]),
    ])


@pytest.fixture()
def cycle_graph(cycle_corpus):
    return build_graph(cycle_corpus)
