# cli.py
import sys
import argparse
import logging

from errors import PageRankError
from indexer import SEPARATOR
from precompute import prepare
from searcher import MAX_RESULTS, normalize_term, search

EXIT_SENTINEL = "x"


def print_results(term, result):
    print(f'The term "{term}" appears in {result.total} location(s).')
    if result.total > MAX_RESULTS:
        print(f"Here are the {MAX_RESULTS} highest ranking results:")
    print("Page Rank:              URL:")
    for rank, url in result.hits:
        print(f"{rank} {url}")
    print()


def query_loop(graph):
    prompt = "Enter your search term: "
    while True:
        try:
            term = normalize_term(input(prompt + "\n"))
        except EOFError:
            break
        if term == EXIT_SENTINEL:
            break
        print_results(term, search(graph, term))
        prompt = f'Enter another search term ("{EXIT_SENTINEL}" to exit): '


def main(argv=None):
    parser = argparse.ArgumentParser(description="Search a PageRank-ranked corpus by keyword")
    parser.add_argument("corpus", nargs="?", help="Path to the corpus file")
    parser.add_argument("--separator", default=SEPARATOR, help="Record separator line")
    parser.add_argument("--progress", action="store_true", help="Show ranking progress")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.WARNING, format='[%(levelname)s] %(message)s')

    path = args.corpus
    if not path:
        try:
            path = input("Enter file name: \n").strip()
        except EOFError:
            path = ""

    try:
        graph = prepare(path, separator=args.separator, progress=args.progress)
    except PageRankError as e:
        print(f"Error reading file: {e}", file=sys.stderr)
        return 1

    query_loop(graph)
    return 0


if __name__ == "__main__":
    sys.exit(main())
