import os

from flask import Flask, jsonify

from tinydb import TinyDB
from tinydb.storages import MemoryStorage

from pairing_r1cs.curve import CURVE_ORDER, backend

from r1cs_routes import r1cs_bp, init_r1cs_bp

DEFAULT_DB_PATH = "db.json"


def open_db(path=None):
    """R1CS_DB_PATH 설정에 따라 TinyDB 를 연다. ":memory:" 는 메모리 DB."""
    if path is None:
        path = os.environ.get("R1CS_DB_PATH", DEFAULT_DB_PATH)
    if path == ":memory:":
        return TinyDB(storage=MemoryStorage)
    return TinyDB(path)


def create_app(db=None):
    if db is None:
        db = open_db()

    app = Flask(__name__)
    app.secret_key = os.environ.get("SECRET_KEY", "key")

    init_r1cs_bp(db.table("r1cs"))
    app.register_blueprint(r1cs_bp)

    @app.route("/")
    def main():
        return jsonify({
            "backend": backend.__name__,
            "field_modulus": str(CURVE_ORDER),
            "endpoints": sorted(
                str(rule) for rule in app.url_map.iter_rules()
                if rule.endpoint.startswith("r1cs.")
            ),
        })

    return app


if __name__ == "__main__":
    create_app().run(debug=True)
