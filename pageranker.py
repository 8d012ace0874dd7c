# pageranker.py
import time
import logging

import numpy as np
from tqdm import tqdm

from errors import EmptyCorpusError

DAMPING = 0.85
ITERATIONS = 50


def _link_arrays(graph, ids):
    """Source/target index pairs for every link between two documents."""
    position = {url: i for i, url in enumerate(ids)}
    sources, targets = [], []
    for url in ids:
        for src in sorted(graph.inlinks(url)):
            sources.append(position[src])
            targets.append(position[url])
    return np.array(sources, dtype=np.intp), np.array(targets, dtype=np.intp)


def compute_ranks(graph, damping=DAMPING, iterations=ITERATIONS, progress=False):
    """Run the fixed-round PageRank update and store the result on each document.

    Every round reads only the previous round's ranks: two rank vectors are
    kept and swapped after each round, so the order documents are visited in
    has no effect on the result. Dangling links still count towards the
    out-degree of the linking document but their targets never receive rank.

    Raises:
        EmptyCorpusError: if the graph has no documents.
    """
    if not len(graph):
        raise EmptyCorpusError("corpus contains no documents, nothing to rank")
    if not 0.0 <= damping <= 1.0:
        raise ValueError(f"damping must be within [0, 1], got {damping}")
    if iterations < 0:
        raise ValueError(f"iterations must be non-negative, got {iterations}")

    start_time = time.time()
    ids = graph.ids()
    N = len(ids)
    sources, targets = _link_arrays(graph, ids)
    out_degree = np.array([len(graph[url].out_links) for url in ids], dtype=float)

    base = (1 - damping) / N
    rank = np.full(N, 1 / N)
    new_rank = np.empty(N)
    share = np.zeros(N)

    for _ in tqdm(range(iterations), desc="PageRank rounds", disable=not progress):
        np.divide(rank, out_degree, out=share, where=out_degree > 0)
        new_rank.fill(0.0)
        np.add.at(new_rank, targets, share[sources])
        new_rank *= damping
        new_rank += base
        rank, new_rank = new_rank, rank

    for url, value in zip(ids, rank):
        graph[url].rank = float(value)

    logging.info(f"[PAGERANK] {iterations} rounds over {N} documents and "
                 f"{len(sources)} internal links. ⏱ {time.time() - start_time:.2f}s")
    return graph
