"""
암호화된 선형결합 (Encrypted Linear Combination)
=================================================

제약 행렬 M 과 암호화된 witness [a₁·G, a₂·G, ..., aₙ·G] 로부터
각 행 k 의 (M·a)_k · G 를 계산한다.

    (M·a)_k · G = Σᵢ M[k][i] · (aᵢ·G)

스칼라 곱의 선형성 덕분에 평문 내적을 구한 뒤 암호화한 것과 같은 점이
나오지만, 이 과정에서 aᵢ 는 한 번도 드러나지 않는다.

G1, G2 어느 쪽 벡터든 같은 함수로 처리한다 (CurveGroup 참고).
"""

import logging

from pairing_r1cs.curve import G1, group_of
from pairing_r1cs.errors import DimensionMismatch
from pairing_r1cs.field import FR, encode

logger = logging.getLogger(__name__)


def _infer_group(points):
    for point in points:
        group = group_of(point)
        if group is not None:
            return group
    # 아핀 백엔드에서 모든 점이 항등원(None)이면 G1, G2 의 항등원이 같다
    return G1


def linear_combine(matrix, encrypted, group=None):
    """각 행에 대해 Σ coeffᵢ · encrypted[i] 를 계산한다.

    Args:
        matrix: 정수 계수 행렬 (행 리스트)
        encrypted: 암호화된 witness (G1 또는 G2 점 리스트)
        group: 점이 속한 CurveGroup. 생략하면 점의 좌표 타입으로 판별한다.

    Returns:
        list: 행마다 하나의 점, 행 순서대로

    Raises:
        DimensionMismatch: 어떤 행의 길이가 len(encrypted) 와 다를 때
            (스칼라 곱을 시작하기 전에 검사한다)
    """
    matrix = [list(row) for row in matrix]
    encrypted = list(encrypted)
    for k, row in enumerate(matrix):
        if len(row) != len(encrypted):
            raise DimensionMismatch(f"제약 행렬 {k}번째 행", len(encrypted), len(row))

    if group is None:
        group = _infer_group(encrypted)

    result = []
    for row in matrix:
        acc = group.zero
        for coeff, point in zip(encode(row), encrypted):
            # 0·P 는 항등원이므로 건너뛴다
            if coeff == FR(0):
                continue
            acc = group.add(acc, group.mul(point, coeff))
        result.append(acc)

    logger.debug("%s 위 선형결합 %d행 계산 완료", group.name, len(result))
    return result


ec_dot_product = linear_combine
