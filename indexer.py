# indexer.py
import re
import logging
from dataclasses import dataclass, field
from collections import defaultdict

from errors import CorpusLoadError

SEPARATOR = "PAGE"

# Runs of punctuation or whitespace split the body text into words
TOKEN_SPLIT = re.compile(r"[.,!?:;'\"\-\s]+")


def tokenize(text):
    if not text:
        return frozenset()
    return frozenset(t for t in TOKEN_SPLIT.split(text.lower()) if t)


@dataclass(eq=False)
class Document:
    id: str
    tokens: frozenset = field(default_factory=frozenset)
    out_links: frozenset = field(default_factory=frozenset)
    rank: float = 0.0


class DocumentGraph:
    """Documents keyed by identifier, plus reverse-link and token indexes.

    The structure is fixed once built. Only ``Document.rank`` changes
    afterwards, and only :func:`pageranker.compute_ranks` writes it.
    """

    def __init__(self, documents=()):
        self._docs = {}
        for doc in documents:
            self._docs[doc.id] = doc

        inlinks = defaultdict(set)
        for doc in self._docs.values():
            for target in doc.out_links:
                inlinks[target].add(doc.id)
        postings = defaultdict(set)
        for doc in self._docs.values():
            for token in doc.tokens:
                postings[token].add(doc.id)
        self._postings = {token: frozenset(urls) for token, urls in postings.items()}

        # Dangling targets are not documents, so they get no entry
        self._inlinks = {
            url: frozenset(inlinks.get(url, ())) for url in self._docs
        }

        if self._docs:
            initial = 1 / len(self._docs)
            for doc in self._docs.values():
                doc.rank = initial

    def __len__(self):
        return len(self._docs)

    def __iter__(self):
        return iter(self._docs)

    def __contains__(self, url):
        return url in self._docs

    def __getitem__(self, url):
        return self._docs[url]

    def ids(self):
        return sorted(self._docs)

    def documents(self):
        return list(self._docs.values())

    def inlinks(self, url):
        """Identifiers of the documents that link to ``url``."""
        return self._inlinks[url]

    def matching(self, token):
        """Documents whose token set contains ``token``."""
        return [self._docs[url] for url in self._postings.get(token, ())]

    def ranks(self):
        return {url: doc.rank for url, doc in self._docs.items()}

    def link_count(self):
        return sum(len(doc.out_links) for doc in self._docs.values())


def _split_lines(text):
    # Only LF and CRLF end a line, form feeds and the like stay inside it
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def _parse_records(lines, separator):
    pos = 0
    total = len(lines)

    # Leading blank lines are tolerated, the first real line must be a separator
    while pos < total and not lines[pos].strip():
        pos += 1
    if pos == total:
        return
    if lines[pos] != separator:
        raise CorpusLoadError(
            f"line {pos + 1}: expected separator {separator!r}, got {lines[pos]!r}"
        )
    pos += 1

    while pos < total:
        # Blank lines after the last separator end the input
        if not any(line.strip() for line in lines[pos:]):
            return
        start = pos
        if lines[pos] == separator or not lines[pos].strip():
            raise CorpusLoadError(f"line {start + 1}: record has no identifier line")
        url = lines[pos]
        pos += 1

        if pos == total or lines[pos] == separator:
            raise CorpusLoadError(f"line {start + 1}: record {url!r} has no body line")
        body = lines[pos]
        pos += 1

        links = set()
        while pos < total and lines[pos] != separator:
            if lines[pos].strip():
                links.add(lines[pos])
            pos += 1
        # Step past the separator that closed this record
        pos += 1

        yield Document(url, tokenize(body), frozenset(links))


def build_graph(text, separator=SEPARATOR):
    """Parse the raw corpus text into a :class:`DocumentGraph`.

    Each record is a separator line, an identifier line, a body line and
    zero or more outgoing-link lines. A later record with the same
    identifier replaces the earlier one.

    Raises:
        CorpusLoadError: if a record is missing its identifier or body line.
    """
    docs = {}
    for doc in _parse_records(_split_lines(text), separator):
        if doc.id in docs:
            logging.warning(f"[LOAD] Duplicate identifier, keeping last record: {doc.id}")
        docs[doc.id] = doc

    graph = DocumentGraph(docs.values())
    logging.info(f"[LOAD] Indexed {len(graph)} documents with {graph.link_count()} links.")
    return graph
