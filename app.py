# app.py
import os
import logging

from flask import Flask, request, render_template

from precompute import prepare
from searcher import search

DEFAULT_CORPUS = 'corpus.txt'


def create_app(graph):
    app = Flask(__name__)

    @app.route("/", methods=["GET", "POST"])
    def home():
        q = ""
        total = 0
        results = []
        if request.method == "POST":
            q = request.form.get('query', '')
            if q.strip():
                total, hits = search(graph, q)
                results = [{'url': url, 'rank': rank} for rank, url in hits]
        return render_template("index.html", results=results, query=q, total=total)

    return app


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format='[%(levelname)s] %(message)s')
    corpus = os.environ.get('PAGERANK_CORPUS', DEFAULT_CORPUS)
    logging.info(f"Loading corpus from {corpus}...")
    app = create_app(prepare(corpus))
    logging.info(f"[READY] Serving {corpus}.")
    app.run(debug=True)
