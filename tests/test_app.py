import pytest

from app import create_app
from pageranker import compute_ranks


@pytest.fixture()
def client(cycle_graph):
    app = create_app(compute_ranks(cycle_graph))
    app.config["TESTING"] = True
    return app.test_client()


def test_get_renders_empty_form(client):
    response = client.get("/")

    assert response.status_code == 200
    assert b'name="query"' in response.data
    assert b"location(s)" not in response.data


def test_post_lists_matching_documents(client):
    response = client.post("/", data={"query": "Cherries"})

    assert response.status_code == 200
    assert b'The term "cherries" appears in 1 location(s).' in response.data
    assert b"http://c.example" in response.data
    assert b"http://a.example" not in response.data


def test_blank_query_runs_no_search(client):
    response = client.post("/", data={"query": "   "})

    assert response.status_code == 200
    assert b"http://" not in response.data
