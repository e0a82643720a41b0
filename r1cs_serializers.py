"""
R1CS 데이터 직렬화/역직렬화 헬퍼
==================================

TinyDB / JSON 에 저장 가능한 형태로 검증기 객체를 변환한다.
FR, G1, G2 점, GT(FQ12) 원소, R1CS, Witness, VerificationResult.

점은 백엔드와 무관하게 아핀 좌표 문자열로 저장하며 항등원은 None 이다.
"""

from pairing_r1cs.curve import G1, G2, backend
from pairing_r1cs.errors import MalformedConstraintSystem
from pairing_r1cs.field import FR
from pairing_r1cs.r1cs import R1CS, Witness


# ─── FR ───

def serialize_fr(val):
    """FR → str(int)"""
    return str(int(val))


def deserialize_fr(s):
    """str(int) → FR"""
    return FR(int(s))


# ─── G1 point ───

def serialize_g1(point):
    """G1 point → [str, str] or None"""
    affine = G1.to_affine(point)
    if affine is None:
        return None
    return [str(int(affine[0])), str(int(affine[1]))]


def deserialize_g1(data):
    """[str, str] or None → G1 point"""
    if data is None:
        return G1.zero
    point = G1.from_affine((backend.FQ(int(data[0])), backend.FQ(int(data[1]))))
    if not G1.is_on_curve(point):
        raise ValueError(f"G1 곡선 위의 점이 아닙니다: {data}")
    return point


# ─── G2 point ───

def serialize_g2(point):
    """G2 point → [[str,str],[str,str]] or None"""
    affine = G2.to_affine(point)
    if affine is None:
        return None
    return [
        [str(int(affine[0].coeffs[0])), str(int(affine[0].coeffs[1]))],
        [str(int(affine[1].coeffs[0])), str(int(affine[1].coeffs[1]))]
    ]


def deserialize_g2(data):
    """[[str,str],[str,str]] or None → G2 point"""
    if data is None:
        return G2.zero
    point = G2.from_affine((
        backend.FQ2([int(data[0][0]), int(data[0][1])]),
        backend.FQ2([int(data[1][0]), int(data[1][1])])
    ))
    if not G2.is_on_curve(point):
        raise ValueError(f"G2 곡선 위의 점이 아닙니다: {data}")
    return point


def serialize_g1_list(points):
    return [serialize_g1(p) for p in points]


def deserialize_g1_list(data):
    return [deserialize_g1(p) for p in data]


def serialize_g2_list(points):
    return [serialize_g2(p) for p in points]


def deserialize_g2_list(data):
    return [deserialize_g2(p) for p in data]


# ─── GT (FQ12) ───

def serialize_gt(element):
    """FQ12 → list of 12 str"""
    return [str(int(c)) for c in element.coeffs]


def deserialize_gt(data):
    """list of 12 str → FQ12"""
    return backend.FQ12([int(c) for c in data])


# ─── R1CS / Witness ───

def serialize_r1cs(r1cs):
    """R1CS → {"L": [[int]], "R": ..., "O": ...}"""
    return {
        "L": [list(row) for row in r1cs.L],
        "R": [list(row) for row in r1cs.R],
        "O": [list(row) for row in r1cs.O],
    }


def deserialize_r1cs(data):
    """dict → R1CS (MalformedConstraintSystem 가능)"""
    try:
        matrices = [data[key] for key in ("L", "R", "O")]
    except (KeyError, TypeError) as e:
        raise MalformedConstraintSystem(f"L, R, O 행렬이 모두 필요합니다: {e}") from e
    for matrix in matrices:
        if not isinstance(matrix, list) or not all(isinstance(row, list) for row in matrix):
            raise MalformedConstraintSystem("행렬은 정수 리스트의 리스트여야 합니다")
        for row in matrix:
            if not all(isinstance(c, int) and not isinstance(c, bool) for c in row):
                raise MalformedConstraintSystem("행렬 계수는 정수여야 합니다")
    return R1CS(*matrices)


def serialize_witness(witness):
    """Witness → list[int]"""
    return list(witness.values)


def deserialize_witness(data):
    """list[int] → Witness"""
    if not isinstance(data, list) or not all(
            isinstance(v, int) and not isinstance(v, bool) for v in data):
        raise ValueError("witness 는 정수 리스트여야 합니다")
    return Witness(data)


# ─── VerificationResult ───

def serialize_result(result):
    """VerificationResult → dict (페어링 값은 짧은 표시용)"""
    return {
        "satisfied": bool(result.satisfied),
        "discrete_logs_equal": bool(result.discrete_logs_equal),
        "failed_constraints": list(result.failed_constraints),
        "lhs": None if result.lhs is None else [gt_short(e) for e in result.lhs],
        "rhs": None if result.rhs is None else [gt_short(e) for e in result.rhs],
    }


# ─── 표시용 축약 ───

def _short(s, n=8):
    if len(s) <= 2 * n + 3:
        return s
    return f"{s[:n]}...{s[-n:]}"


def fr_short(val):
    return _short(str(int(val)))


def g1_short(point):
    data = serialize_g1(point)
    if data is None:
        return "O"
    return f"({_short(data[0])}, {_short(data[1])})"


def g2_short(point):
    data = serialize_g2(point)
    if data is None:
        return "O"
    return f"({_short(data[0][0])}+{_short(data[0][1])}u, ...)"


def gt_short(element):
    return _short(str(int(element.coeffs[0])))
