"""
R1CS 검증 오류 정의
====================

검증 파이프라인에서 발생할 수 있는 오류는 두 종류뿐이다.
유한체/타원곡선 연산 자체는 실패하지 않는다.

  - DimensionMismatch: 벡터/행렬 길이 불일치 (계산 시작 전에 발생)
  - MalformedConstraintSystem: L, R, O 행렬의 행/열 수 불일치 (생성 시 발생)
"""


class R1CSError(ValueError):
    """R1CS 검증 오류의 기본 클래스."""


class DimensionMismatch(R1CSError):
    """입력 벡터/행렬의 길이가 맞지 않을 때 발생한다."""

    def __init__(self, what, expected, actual):
        self.what = what
        self.expected = expected
        self.actual = actual
        super().__init__(f"{what}: 길이 {expected}이어야 하지만 {actual}입니다")


class MalformedConstraintSystem(R1CSError):
    """L, R, O 행렬이 R1CS 형식을 만족하지 않을 때 발생한다."""
