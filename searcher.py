# searcher.py
import heapq
import logging
import time
from typing import NamedTuple

MAX_RESULTS = 20


class SearchResult(NamedTuple):
    total: int
    hits: list


def normalize_term(term):
    return term.strip().lower() if term else ""


def search(graph, term, limit=MAX_RESULTS) -> SearchResult:
    """Documents whose token set contains ``term``, highest rank first.

    ``total`` counts every match, ``hits`` holds at most ``limit``
    ``(rank, id)`` pairs. Equal ranks are ordered by identifier.
    """
    start_time = time.time()
    word = normalize_term(term)
    if not word:
        logging.warning(f"[SEARCH] Query normalized to empty: '{term}'")
        return SearchResult(0, [])

    matches = graph.matching(word)
    top = heapq.nsmallest(limit, matches, key=lambda doc: (-doc.rank, doc.id))
    hits = [(doc.rank, doc.id) for doc in top]

    logging.info(f"[SEARCH] Query: '{word}' | Matches: {len(matches)} | "
                 f"Returned: {len(hits)} ⏱ {time.time() - start_time:.4f}s")
    return SearchResult(len(matches), hits)
