"""
타원곡선 그룹 G1, G2 및 쌍선형 페어링 (BN254)
===============================================

검증기 전체에서 사용하는 그룹 연산을 하나의 인터페이스로 묶는다.

**그룹 능력(capability)**:
  선형결합 엔진은 G1과 G2를 구분하지 않는다. 두 그룹 모두
  생성자(generator), 항등원(zero), 스칼라 곱, 점 덧셈, 동등성 비교만 있으면
  같은 코드로 Σ cᵢ·Pᵢ 를 계산할 수 있다. CurveGroup 객체가 이 능력을 제공하고,
  G1, G2는 그 두 인스턴스이다.

**페어링**:
  e: G1 × G2 → GT,  e(aP, bQ) = e(P, Q)^(ab)
  GT 원소는 FQ12이며, 항등원은 FQ12.one()이다.

**백엔드 설정**:
  py_ecc의 두 구현 중 하나를 환경 변수 PAIRING_R1CS_BACKEND로 고른다.
  - optimized_bn128 (기본값): 야코비안 좌표 (x, y, z), 항등원 z = 0
  - bn128: 아핀 좌표 (x, y), 항등원 None

사용 예시:
    >>> from pairing_r1cs.curve import G1, G2, ec_pairing
    >>> P = G1.mul(G1.generator, 5)        # 5·G1
    >>> Q = G2.mul(G2.generator, 3)        # 3·G2
    >>> ec_pairing(Q, P) == ec_pairing(G2.generator, G1.mul(G1.generator, 15))
    True
"""

import importlib
import logging
import os

logger = logging.getLogger(__name__)

BACKEND_ENV = "PAIRING_R1CS_BACKEND"
DEFAULT_BACKEND = "optimized_bn128"
SUPPORTED_BACKENDS = ("optimized_bn128", "bn128")


def load_backend(name=None):
    """py_ecc 페어링 백엔드 모듈을 불러온다.

    Args:
        name: 백엔드 이름. None이면 환경 변수, 그것도 없으면 기본값을 사용한다.

    Returns:
        module: py_ecc.optimized_bn128 또는 py_ecc.bn128

    Raises:
        ValueError: 지원하지 않는 백엔드 이름일 때
    """
    if name is None:
        name = os.environ.get(BACKEND_ENV, DEFAULT_BACKEND)
    if name not in SUPPORTED_BACKENDS:
        raise ValueError(
            f"지원하지 않는 페어링 백엔드입니다: {name} "
            f"(가능한 값: {', '.join(SUPPORTED_BACKENDS)})"
        )
    logger.debug("py_ecc.%s 백엔드를 사용합니다", name)
    return importlib.import_module(f"py_ecc.{name}")


backend = load_backend()

# 스칼라 필드 위수 (BN254 곡선 위수)
CURVE_ORDER = backend.curve_order


class CurveGroup:
    """BN254 위의 타원곡선 그룹 (G1 또는 G2).

    속성:
        name: "G1" 또는 "G2"
        generator: 고정 생성자
        zero: 항등원 (무한원점)
        b: 곡선 방정식 y² = x³ + b 의 상수
    """

    def __init__(self, name, generator, b):
        self.name = name
        self.generator = generator
        self.b = b
        # 백엔드마다 항등원 표현이 다르므로 0·G로 얻는다
        self.zero = backend.multiply(generator, 0)
        self.coord_type = type(generator[0])

    def __repr__(self):
        return f"CurveGroup({self.name})"

    def mul(self, point, scalar):
        """스칼라 곱 scalar · point.

        scalar는 정수 또는 FR 원소이며, 곡선 위수로 축약한 뒤 곱한다.
        0 스칼라는 곱셈 없이 항등원을 돌려준다.
        """
        scalar = int(scalar) % CURVE_ORDER
        if scalar == 0 or self.is_zero(point):
            return self.zero
        return backend.multiply(point, scalar)

    def add(self, p1, p2):
        """점 덧셈 p1 + p2."""
        return backend.add(p1, p2)

    def neg(self, point):
        """점의 역원 -point."""
        return backend.neg(point)

    def eq(self, p1, p2):
        """두 점이 같은지 비교한다 (야코비안 좌표에서도 올바르게 동작)."""
        return backend.eq(p1, p2)

    def is_zero(self, point):
        return self.eq(point, self.zero)

    def is_on_curve(self, point):
        return backend.is_on_curve(point, self.b)

    def encrypt(self, scalars):
        """스칼라 벡터를 그룹 원소 벡터로 "암호화"한다: [s·G for s in scalars].

        이산로그 문제의 어려움 때문에 결과에서 스칼라를 복원할 수 없다.
        """
        return [self.mul(self.generator, s) for s in scalars]

    def to_affine(self, point):
        """아핀 좌표 (x, y)로 변환한다. 항등원은 None."""
        if self.is_zero(point):
            return None
        if len(point) == 3:
            return backend.normalize(point)
        return point

    def from_affine(self, xy):
        """아핀 좌표 (x, y) 또는 None을 백엔드 점 표현으로 되돌린다."""
        if xy is None:
            return self.zero
        x, y = xy
        if len(self.generator) == 3:
            return (x, y, x.one())
        return (x, y)


G1 = CurveGroup("G1", backend.G1, backend.b)
G2 = CurveGroup("G2", backend.G2, backend.b2)


def group_of(point):
    """점의 좌표 타입으로 소속 그룹을 판별한다.

    FQ 좌표는 G1, FQ2 좌표는 G2이다. 아핀 백엔드의 항등원(None)은
    두 그룹이 공유하므로 판별할 수 없어 None을 돌려준다.

    Raises:
        TypeError: BN254 점이 아닐 때
    """
    if point is None:
        return None
    if isinstance(point[0], G2.coord_type):
        return G2
    if isinstance(point[0], G1.coord_type):
        return G1
    raise TypeError(f"BN254 곡선 위의 점이 아닙니다: {point!r}")


def target_one():
    """GT(FQ12)의 항등원."""
    return backend.FQ12.one()


def ec_pairing(g2_point, g1_point):
    """쌍선형 페어링 e(G1, G2) → GT.

    주의:
        py_ecc의 pairing과 같이 인자 순서는 (G2, G1)이다.

    항등원이 하나라도 있으면 e(O, Q) = e(P, O) = 1 이므로
    밀러 루프 없이 FQ12.one()을 돌려준다.
    """
    if G2.is_zero(g2_point) or G1.is_zero(g1_point):
        return target_one()
    return backend.pairing(g2_point, g1_point)
