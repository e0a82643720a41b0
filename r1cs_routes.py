"""
R1CS Flask Blueprint — 암호화된 witness 검증 엔드포인트
=========================================================

제약 시스템 입력 → witness 입력 → 암호화 → 검증 순서로 진행하며,
각 단계의 결과는 TinyDB 에 "r1cs.*" 키로 저장된다.
모든 응답은 JSON 이다.
"""

from flask import Blueprint, current_app, jsonify, request
from tinydb import Query

from pairing_r1cs.errors import R1CSError
from pairing_r1cs.example import build_r1cs, build_witness
from pairing_r1cs.verifier import encrypt_witness, verify

from r1cs_serializers import (
    serialize_r1cs, deserialize_r1cs,
    serialize_witness, deserialize_witness,
    serialize_g1_list, deserialize_g1_list,
    serialize_g2_list, deserialize_g2_list,
    serialize_result,
    g1_short, g2_short,
)

r1cs_bp = Blueprint('r1cs', __name__, url_prefix='/r1cs')

DATA = Query()

# DB는 app.py에서 주입
DB = None


def init_r1cs_bp(db):
    """app.py에서 DB를 주입받는다."""
    global DB
    DB = db


# ─── DB 헬퍼 ───

def db_get(key):
    """DB에서 키로 데이터를 조회한다."""
    result = DB.search(DATA.type == key)
    if not result:
        return None
    return result[0].get("data")


def db_set(key, data):
    """DB에 키로 데이터를 저장한다."""
    DB.upsert({"type": key, "data": data}, DATA.type == key)


def db_remove_prefix(prefix):
    """prefix로 시작하는 모든 키를 삭제한다."""
    DB.remove(DATA.type.test(lambda t: t.startswith(prefix)))


def error_response(message, status=400):
    return jsonify({"error": message}), status


def json_body():
    """요청 본문을 dict 로 읽는다. 본문이 없으면 빈 dict, 객체가 아니면 None."""
    body = request.get_json(silent=True)
    if body is None:
        return {}
    if not isinstance(body, dict):
        return None
    return body


def is_int(value):
    return isinstance(value, int) and not isinstance(value, bool)


@r1cs_bp.errorhandler(R1CSError)
def handle_r1cs_error(e):
    current_app.logger.warning("R1CS 오류: %s", e)
    return error_response(str(e))


def state():
    return {
        "constraints": db_get("r1cs.constraints"),
        "witness": db_get("r1cs.witness"),
        "encrypted": db_get("r1cs.encrypted.summary"),
        "result": db_get("r1cs.verify.result"),
    }


@r1cs_bp.route("/")
def r1cs_state():
    """저장된 상태를 반환한다."""
    return jsonify(state())


@r1cs_bp.route("/load-example", methods=["POST"])
def load_example():
    """예제 식 z = 2x³ + 4xy² − xy + 5 의 R1CS 와 witness 를 저장한다."""
    body = json_body()
    if body is None:
        return error_response("요청 본문은 JSON 객체여야 합니다")
    x = body.get("x", 3)
    y = body.get("y", 2)
    if not is_int(x) or not is_int(y):
        return error_response("x, y 는 정수여야 합니다")

    db_remove_prefix("r1cs.")
    db_set("r1cs.constraints", serialize_r1cs(build_r1cs()))
    db_set("r1cs.witness", serialize_witness(build_witness(x, y)))
    return jsonify(state())


@r1cs_bp.route("/constraints", methods=["POST"])
def save_constraints():
    """L, R, O 행렬을 저장한다."""
    r1cs = deserialize_r1cs(request.get_json(silent=True))
    db_remove_prefix("r1cs.")
    db_set("r1cs.constraints", serialize_r1cs(r1cs))
    return jsonify(state())


@r1cs_bp.route("/witness", methods=["POST"])
def save_witness():
    """witness 벡터 a 를 저장한다."""
    body = json_body()
    if body is None:
        return error_response("요청 본문은 JSON 객체여야 합니다")
    try:
        witness = deserialize_witness(body.get("a"))
    except ValueError as e:
        return error_response(str(e))

    constraints = db_get("r1cs.constraints")
    if constraints is not None:
        deserialize_r1cs(constraints).check_witness(witness)

    db_remove_prefix("r1cs.encrypted.")
    db_remove_prefix("r1cs.verify.")
    db_set("r1cs.witness", serialize_witness(witness))
    return jsonify(state())


@r1cs_bp.route("/encrypt", methods=["POST"])
def encrypt():
    """저장된 witness 를 G1, G2 로 암호화한다."""
    witness_raw = db_get("r1cs.witness")
    if witness_raw is None:
        return error_response("witness 가 없습니다")

    a_g1, a_g2 = encrypt_witness(deserialize_witness(witness_raw))
    db_set("r1cs.encrypted.g1", serialize_g1_list(a_g1))
    db_set("r1cs.encrypted.g2", serialize_g2_list(a_g2))
    db_set("r1cs.encrypted.summary", {
        "g1": [g1_short(p) for p in a_g1],
        "g2": [g2_short(p) for p in a_g2],
    })
    db_remove_prefix("r1cs.verify.")
    return jsonify(state())


@r1cs_bp.route("/verify", methods=["POST"])
def verify_r1cs():
    """저장된 암호화 witness 로 검증을 실행한다."""
    constraints = db_get("r1cs.constraints")
    g1_raw = db_get("r1cs.encrypted.g1")
    g2_raw = db_get("r1cs.encrypted.g2")
    if constraints is None or g1_raw is None or g2_raw is None:
        return error_response("제약 시스템과 암호화된 witness 가 필요합니다")

    r1cs = deserialize_r1cs(constraints)
    result = verify(r1cs, deserialize_g1_list(g1_raw), deserialize_g2_list(g2_raw))
    current_app.logger.info("R1CS 검증 결과: %s", result)

    db_set("r1cs.verify.result", serialize_result(result))
    return jsonify(state())


@r1cs_bp.route("/clear", methods=["POST"])
def clear():
    """저장된 상태를 모두 지운다."""
    db_remove_prefix("r1cs.")
    return jsonify(state())
