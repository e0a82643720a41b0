"""
스칼라 필드 FR 및 정수 → 필드 인코더
======================================

R1CS 계수와 witness 값은 부호 있는 정수이지만, 타원곡선 스칼라 곱은
곡선 위수 p 위의 소수체 원소를 요구한다.

**유한체 FR**:
  bn128(BN254) 곡선의 스칼라 필드. py_ecc의 FQ를 상속한다.
  - 위수 p = bn128.curve_order ≈ 2^254
  - 모든 원소는 [0, p) 범위의 정규 대표원(canonical representative)으로 저장

**부호 처리 (2단계 변환)**:
  1. 크기 올리기: |c| 를 필드로 축약 → FR(|c|)
  2. 조건부 부정: c < 0 이면 필드에서 부정 → p - (|c| mod p)

  예: c = -1  →  FR(1)  →  -FR(1) = p - 1
      c =  5  →  FR(5)

  정수 하나하나를 그대로 FR로 넘기는 대신 두 단계로 나누면
  어떤 필드 구현에서도 같은 결과가 나온다.

사용 예시:
    >>> from pairing_r1cs.field import encode
    >>> [int(x) for x in encode([0, 5, -1])]
    [0, 5, 21888242871839275222246405745257275088548364400416034343698204186575808495616]
"""

from py_ecc.fields import bn128_FQ as FQ
from py_ecc import bn128


class FR(FQ):
    """bn128 스칼라 필드 위의 유한체 원소.

    속성:
        field_modulus: bn128 곡선 위수 (소수 p)
    """
    field_modulus = bn128.curve_order


# 필드 크기
FIELD_ORDER = bn128.curve_order


def to_field_element(value):
    """부호 있는 정수 하나를 FR 원소로 변환한다.

    Args:
        value: 정수 또는 FR 원소

    Returns:
        FR: 크기를 필드로 올린 뒤, 음수였다면 부정한 값

    Raises:
        TypeError: 정수가 아닌 값일 때
    """
    if isinstance(value, FR):
        return value
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"정수 계수만 인코딩할 수 있습니다: {value!r}")

    magnitude = FR(abs(value))
    if value < 0:
        return -magnitude
    return magnitude


def encode(coefficients):
    """정수 계수 시퀀스를 FR 원소 리스트로 변환한다.

    길이와 순서는 보존된다. p 이상의 크기는 mod p로 조용히 축약된다.

    Args:
        coefficients: 부호 있는 정수 시퀀스 (R1CS 행 또는 witness)

    Returns:
        list[FR]
    """
    return [to_field_element(c) for c in coefficients]


to_field_elements = encode
