"""
Flask API tests (app.create_app + r1cs_routes)
"""
import pytest
from tinydb import TinyDB
from tinydb.storages import MemoryStorage

from app import create_app


# x · x = y
SQUARE_L = [[0, 1, 0]]
SQUARE_R = [[0, 1, 0]]
SQUARE_O = [[0, 0, 1]]


@pytest.fixture
def client():
    app = create_app(TinyDB(storage=MemoryStorage))
    app.testing = True
    return app.test_client()


def post(client, path, body=None):
    return client.post(path, json=body if body is not None else {})


class TestIndex:
    def test_lists_endpoints(self, client):
        data = client.get("/").get_json()
        assert data["backend"].startswith("py_ecc.")
        assert "/r1cs/verify" in data["endpoints"]

    def test_empty_state(self, client):
        data = client.get("/r1cs/").get_json()
        assert data == {"constraints": None, "witness": None,
                        "encrypted": None, "result": None}


class TestConstraints:
    def test_save(self, client):
        res = post(client, "/r1cs/constraints", {"L": SQUARE_L, "R": SQUARE_R, "O": SQUARE_O})
        assert res.status_code == 200
        assert res.get_json()["constraints"]["L"] == SQUARE_L

    def test_malformed(self, client):
        res = post(client, "/r1cs/constraints", {"L": [[0, 1]], "R": SQUARE_R, "O": SQUARE_O})
        assert res.status_code == 400
        assert "error" in res.get_json()

    def test_load_example(self, client):
        data = post(client, "/r1cs/load-example").get_json()
        assert len(data["constraints"]["L"]) == 5
        assert data["witness"] == [1, 101, 3, 2, 9, 54, 4, 48]

    def test_load_example_bad_input(self, client):
        res = post(client, "/r1cs/load-example", {"x": "three"})
        assert res.status_code == 400


class TestWitness:
    def test_wrong_length_for_constraints(self, client):
        post(client, "/r1cs/constraints", {"L": SQUARE_L, "R": SQUARE_R, "O": SQUARE_O})
        res = post(client, "/r1cs/witness", {"a": [1, 3]})
        assert res.status_code == 400

    def test_not_integers(self, client):
        res = post(client, "/r1cs/witness", {"a": ["x"]})
        assert res.status_code == 400


class TestFlow:
    def test_encrypt_requires_witness(self, client):
        assert post(client, "/r1cs/encrypt").status_code == 400

    def test_verify_requires_data(self, client):
        assert post(client, "/r1cs/verify").status_code == 400

    def _run(self, client, witness):
        post(client, "/r1cs/constraints", {"L": SQUARE_L, "R": SQUARE_R, "O": SQUARE_O})
        post(client, "/r1cs/witness", {"a": witness})
        encrypted = post(client, "/r1cs/encrypt").get_json()["encrypted"]
        assert len(encrypted["g1"]) == len(encrypted["g2"]) == 3
        res = post(client, "/r1cs/verify")
        assert res.status_code == 200
        return res.get_json()["result"]

    def test_valid_witness(self, client):
        result = self._run(client, [1, 3, 9])
        assert result["satisfied"] is True
        assert result["discrete_logs_equal"] is True
        assert result["lhs"] == result["rhs"]

    def test_invalid_witness(self, client):
        result = self._run(client, [1, 3, 10])
        assert result["satisfied"] is False
        assert result["failed_constraints"] == [0]

    def test_new_witness_clears_result(self, client):
        self._run(client, [1, 3, 9])
        data = post(client, "/r1cs/witness", {"a": [1, 4, 16]}).get_json()
        assert data["encrypted"] is None
        assert data["result"] is None

    def test_clear(self, client):
        self._run(client, [1, 3, 9])
        data = post(client, "/r1cs/clear").get_json()
        assert data == {"constraints": None, "witness": None,
                        "encrypted": None, "result": None}


class TestRequestBody:
    def test_witness_list_body(self, client):
        res = client.post("/r1cs/witness", json=[1, 3, 9])
        assert res.status_code == 400
        assert "error" in res.get_json()

    def test_load_example_list_body(self, client):
        res = client.post("/r1cs/load-example", json=[1])
        assert res.status_code == 400
        assert "error" in res.get_json()

    def test_load_example_bool_input(self, client):
        res = post(client, "/r1cs/load-example", {"x": True})
        assert res.status_code == 400
