"""
R1CS 데모: z = 2x³ + 4xy² − xy + 5  (x = 3, y = 2)
=====================================================

암호화된 witness 만으로 R1CS 만족 여부를 확인하는 전체 흐름을 시연한다.

실행:
    python -m pairing_r1cs.example

제약 (witness a = [1, z, x, y, v1, v2, v3, v4]):
    v1 = x · x
    v2 = 2·v1 · x
    v3 = y · y
    v4 = 4x · v3
    5 − z + v2 + v4 = x · y
"""

from pairing_r1cs.r1cs import R1CS, Witness
from pairing_r1cs.verifier import encrypt_witness, verify


def build_r1cs():
    """z = 2x³ + 4xy² − xy + 5 의 R1CS (5개 제약, 8개 변수)."""
    L = [
        [0, 0, 1, 0, 0, 0, 0, 0],
        [0, 0, 0, 0, 2, 0, 0, 0],
        [0, 0, 0, 1, 0, 0, 0, 0],
        [0, 0, 4, 0, 0, 0, 0, 0],
        [0, 0, 1, 0, 0, 0, 0, 0],
    ]
    R = [
        [0, 0, 1, 0, 0, 0, 0, 0],
        [0, 0, 1, 0, 0, 0, 0, 0],
        [0, 0, 0, 1, 0, 0, 0, 0],
        [0, 0, 0, 0, 0, 0, 1, 0],
        [0, 0, 0, 1, 0, 0, 0, 0],
    ]
    O = [
        [0, 0, 0, 0, 1, 0, 0, 0],
        [0, 0, 0, 0, 0, 1, 0, 0],
        [0, 0, 0, 0, 0, 0, 1, 0],
        [0, 0, 0, 0, 0, 0, 0, 1],
        [5, -1, 0, 0, 0, 1, 0, 1],
    ]
    return R1CS(L, R, O)


def build_witness(x, y):
    """witness [1, z, x, y, v1, v2, v3, v4] 를 계산한다."""
    v1 = x * x
    v2 = 2 * v1 * x
    v3 = y * y
    v4 = 4 * x * v3
    z = v2 + v4 - x * y + 5
    return Witness([1, z, x, y, v1, v2, v3, v4])


def main(x=3, y=2):
    print("=" * 60)
    print("  Encrypted R1CS Verification Demo")
    print(f"  식: z = 2x³ + 4xy² − xy + 5 (x = {x}, y = {y})")
    print("=" * 60)

    # ── 1. 제약 시스템 ──
    print("\n[1] R1CS 구성...")
    r1cs = build_r1cs()
    print(f"    제약 수: {r1cs.num_constraints}")
    print(f"    변수 수: {r1cs.num_variables}")

    # ── 2. witness ──
    print("\n[2] witness 계산...")
    witness = build_witness(x, y)
    print(f"    a = {list(witness)}")
    print(f"    평문 검사: {'✓' if r1cs.is_satisfied(witness) else '✗'}")

    # ── 3. 암호화 ──
    print("\n[3] witness 암호화 (aᵢ·G1, aᵢ·G2)...")
    a_g1, a_g2 = encrypt_witness(witness)
    print(f"    G1 점 {len(a_g1)}개, G2 점 {len(a_g2)}개")

    # ── 4. 검증 ──
    print("\n[4] 페어링 검증...")
    result = verify(r1cs, a_g1, a_g2)
    print(f"    이산로그 동등성: {'✓' if result.discrete_logs_equal else '✗'}")
    print(f"    e(La·G1, Ra·G2) == e(Oa·G1, G2): {'성공 ✓' if result.satisfied else '실패 ✗'}")

    # ── 5. 조작된 witness ──
    # z 를 1 늘리면 마지막 제약이 깨져야 한다.
    print("\n[5] 조작된 witness 로 검증 (z + 1)...")
    fake = witness.replace(1, witness[1] + 1)
    fake_g1, fake_g2 = encrypt_witness(fake)
    wrong = verify(r1cs, fake_g1, fake_g2)
    print(f"    검증 결과: {'성공 ✓' if wrong.satisfied else '실패 ✗ (예상대로 실패)'}")
    print(f"    깨진 제약: {wrong.failed_constraints}")

    print("\n" + "=" * 60)
    if result.satisfied and not wrong.satisfied:
        print("  데모 완료: 모든 테스트 통과!")
    else:
        print("  데모 완료: 일부 테스트 실패")
    print("=" * 60)

    return result.satisfied


if __name__ == "__main__":
    main()
