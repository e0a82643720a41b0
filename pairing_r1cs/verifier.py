"""
R1CS 만족 여부 검증 (암호화된 witness)
========================================

암호화된 witness 한 쌍 (a·G1, a·G2) 만으로 R1CS 가 만족되는지 확인한다.

검증 절차:
  1. 길이 검사: len(aG1) == len(aG2) == 변수 수
  2. 이산로그 동등성: aG1 과 aG2 가 같은 witness 를 담고 있는가?
     아니라면 이후 검사는 의미가 없으므로 중단한다.
  3. 선형결합:  LaG1 = L·aG1,  RaG2 = R·aG2,  OaG1 = O·aG1
  4. lhs = [e(LaG1ₖ, RaG2ₖ)]
  5. rhs = [e(OaG1ₖ, G2)]
  6. 모든 k 에서 lhs[k] == rhs[k] 이면 만족

쌍선형성에 의해 lhs[k] = e(G1,G2)^((L·a)_k·(R·a)_k),
rhs[k] = e(G1,G2)^((O·a)_k) 이므로 6 은 (L·a) ⊙ (R·a) = O·a 와 같다.

주의:
  영지식(zero-knowledge) 증명이 아니다. 암호화된 witness 전체가 노출되며,
  숨김 성질은 이산로그 문제의 어려움뿐이다.
"""

import logging

from pairing_r1cs.curve import G1, G2
from pairing_r1cs.errors import DimensionMismatch
from pairing_r1cs.linear_combination import linear_combine
from pairing_r1cs.pairing import check_equality_discrete_logs, hadamard_pairing

logger = logging.getLogger(__name__)


class VerificationResult:
    """검증 결과.

    속성:
        discrete_logs_equal: aG1, aG2 가 같은 witness 의 암호화인지
        lhs: [e(LaG1ₖ, RaG2ₖ)] (이산로그 검사 실패 시 None)
        rhs: [e(OaG1ₖ, G2)]    (이산로그 검사 실패 시 None)
        failed_constraints: lhs[k] != rhs[k] 인 제약 인덱스
        satisfied: 최종 판정
    """

    def __init__(self, discrete_logs_equal, lhs=None, rhs=None):
        self.discrete_logs_equal = discrete_logs_equal
        self.lhs = lhs
        self.rhs = rhs
        if lhs is None or rhs is None:
            self.failed_constraints = []
        else:
            self.failed_constraints = [
                k for k, (left, right) in enumerate(zip(lhs, rhs)) if left != right
            ]

    @property
    def satisfied(self):
        return (
            self.discrete_logs_equal
            and self.lhs is not None
            and self.lhs == self.rhs
        )

    def __bool__(self):
        return self.satisfied

    def __repr__(self):
        return (f"VerificationResult(satisfied={self.satisfied}, "
                f"discrete_logs_equal={self.discrete_logs_equal}, "
                f"failed_constraints={self.failed_constraints})")


def encrypt_witness(witness):
    """witness 를 G1, G2 양쪽으로 암호화한 짝 (aG1, aG2) 을 반환한다."""
    return witness.encrypt(G1), witness.encrypt(G2)


def verify(r1cs, a_g1, a_g2):
    """암호화된 witness 짝으로 R1CS 만족 여부를 검증한다.

    Args:
        r1cs: R1CS 인스턴스
        a_g1: witness 의 G1 암호화
        a_g2: witness 의 G2 암호화

    Returns:
        VerificationResult

    Raises:
        DimensionMismatch: 벡터 길이가 변수 수와 다를 때 (페어링 계산 전)
    """
    a_g1, a_g2 = list(a_g1), list(a_g2)
    if len(a_g1) != r1cs.num_variables:
        raise DimensionMismatch("G1 암호화 witness", r1cs.num_variables, len(a_g1))
    if len(a_g2) != r1cs.num_variables:
        raise DimensionMismatch("G2 암호화 witness", r1cs.num_variables, len(a_g2))

    if not check_equality_discrete_logs(a_g1, a_g2):
        logger.info("이산로그 불일치: G1, G2 witness 가 같은 값을 담고 있지 않습니다")
        return VerificationResult(discrete_logs_equal=False)

    l_a_g1 = linear_combine(r1cs.L, a_g1, G1)
    r_a_g2 = linear_combine(r1cs.R, a_g2, G2)
    o_a_g1 = linear_combine(r1cs.O, a_g1, G1)

    lhs = hadamard_pairing(l_a_g1, r_a_g2)
    rhs = hadamard_pairing(o_a_g1, [G2.generator] * len(o_a_g1))

    result = VerificationResult(True, lhs, rhs)
    logger.info("R1CS 검증 (%d개 제약): %s", r1cs.num_constraints,
                "만족" if result.satisfied else f"불만족 {result.failed_constraints}")
    return result


def check_r1cs(r1cs, a_g1, a_g2):
    """verify 의 bool 버전."""
    return verify(r1cs, a_g1, a_g2).satisfied
