# precompute.py
import sys
import logging

from errors import CorpusLoadError, PageRankError
from indexer import SEPARATOR, build_graph
from pageranker import compute_ranks


def load_corpus(file):
    try:
        with open(file, encoding='utf-8') as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise CorpusLoadError(f"cannot read corpus {file}: {e}") from e


def prepare(file, separator=SEPARATOR, progress=False):
    """Read the corpus at ``file``, build its graph and rank it."""
    logging.info(f"[LOAD] Reading corpus from {file}")
    graph = build_graph(load_corpus(file), separator=separator)
    return compute_ranks(graph, progress=progress)


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO, format='[%(levelname)s] %(message)s')
    path = sys.argv[1] if len(sys.argv) > 1 else 'corpus.txt'

    try:
        graph = prepare(path, progress=True)
    except PageRankError as e:
        logging.error(f"Precomputation failed: {e}")
        sys.exit(1)

    print("Precomputation complete!")
    print(f"Documents indexed: {len(graph)}")
    print(f"Outgoing links: {graph.link_count()}")
    top = sorted(graph.ranks().items(), key=lambda item: (-item[1], item[0]))[:5]
    for url, rank in top:
        print(f"{rank:.6f} {url}")
