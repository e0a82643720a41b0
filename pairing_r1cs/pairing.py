"""
아다마르 페어링과 이산로그 동등성 검사
========================================

**아다마르(Hadamard) 페어링**:
  같은 길이의 G1 벡터 [P₁, ..., Pₙ] 과 G2 벡터 [Q₁, ..., Qₙ] 에 대해
  원소별로 페어링한다.

    [e(P₁, Q₁), e(P₂, Q₂), ..., e(Pₙ, Qₙ)]

  Pₖ = (L·a)_k·G1, Qₖ = (R·a)_k·G2 이면 쌍선형성에 의해

    e(Pₖ, Qₖ) = e(G1, G2)^((L·a)_k · (R·a)_k)

  즉 지수(exponent) 위에서 원소별 곱셈 (L·a) ⊙ (R·a) 를 계산한 것과 같다.

**이산로그 동등성**:
  G1 벡터 [a₁·G1, ...] 와 G2 벡터 [b₁·G2, ...] 가 같은 스칼라로
  만들어졌는지(aᵢ = bᵢ) 스칼라를 모른 채 확인한다.

    e(aᵢ·G1, G2) = e(G1, G2)^aᵢ = e(G1, aᵢ·G2)

  모든 i 에서 위 등식이 성립하면 두 벡터는 같은 witness 를 암호화한
  "짝(matched pair)"이다.

사용 예시:
    >>> a_g1 = G1.encrypt([1, 2, 3])
    >>> a_g2 = G2.encrypt([1, 2, 3])
    >>> check_equality_discrete_logs(a_g1, a_g2)
    True
"""

from pairing_r1cs.curve import G1, G2, ec_pairing
from pairing_r1cs.errors import DimensionMismatch


def _check_lengths(g1_vec, g2_vec):
    if len(g1_vec) != len(g2_vec):
        raise DimensionMismatch("G2 벡터", len(g1_vec), len(g2_vec))


def hadamard_pairing(g1_vec, g2_vec):
    """G1 벡터와 G2 벡터를 원소별로 페어링한다.

    Args:
        g1_vec: G1 점 리스트
        g2_vec: G2 점 리스트 (g1_vec 과 같은 길이)

    Returns:
        list[FQ12]: [e(g1_vec[i], g2_vec[i]) for i], 순서 보존

    Raises:
        DimensionMismatch: 두 벡터의 길이가 다를 때
    """
    g1_vec, g2_vec = list(g1_vec), list(g2_vec)
    _check_lengths(g1_vec, g2_vec)
    return [ec_pairing(q, p) for p, q in zip(g1_vec, g2_vec)]


def check_equality_discrete_logs(g1_vec, g2_vec):
    """두 암호화 벡터가 같은 스칼라 수열을 담고 있는지 확인한다.

    각 i 에 대해 e(g1_vec[i], G2) == e(G1, g2_vec[i]) 를 검사하며,
    처음 불일치가 나오면 바로 False 를 반환한다.

    Raises:
        DimensionMismatch: 두 벡터의 길이가 다를 때
    """
    g1_vec, g2_vec = list(g1_vec), list(g2_vec)
    _check_lengths(g1_vec, g2_vec)
    return all(
        ec_pairing(G2.generator, p) == ec_pairing(q, G1.generator)
        for p, q in zip(g1_vec, g2_vec)
    )
