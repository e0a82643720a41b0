import sys
import os
import pytest

# 프로젝트 루트를 sys.path에 추가
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from pairing_r1cs.example import build_r1cs, build_witness
from pairing_r1cs.r1cs import R1CS, Witness
from pairing_r1cs.verifier import encrypt_witness, verify


# ── 테스트 상수 ──
X = 3
Y = 2
EXPECTED_WITNESS = [1, 101, 3, 2, 9, 54, 4, 48]

# x · x = y  (witness [1, x, y])
SQUARE_L = [[0, 1, 0]]
SQUARE_R = [[0, 1, 0]]
SQUARE_O = [[0, 0, 1]]


@pytest.fixture(scope="session")
def example_r1cs():
    """z = 2x³ + 4xy² − xy + 5 의 R1CS."""
    return build_r1cs()


@pytest.fixture(scope="session")
def example_witness():
    return build_witness(X, Y)


@pytest.fixture(scope="session")
def encrypted_witness(example_witness):
    """(aG1, aG2) 짝."""
    return encrypt_witness(example_witness)


@pytest.fixture(scope="session")
def example_result(example_r1cs, encrypted_witness):
    a_g1, a_g2 = encrypted_witness
    return verify(example_r1cs, a_g1, a_g2)


@pytest.fixture(scope="session")
def tampered_result(example_r1cs, example_witness):
    """z 를 1 늘린 witness 의 검증 결과."""
    fake = example_witness.replace(1, example_witness[1] + 1)
    a_g1, a_g2 = encrypt_witness(fake)
    return verify(example_r1cs, a_g1, a_g2)


@pytest.fixture
def square_r1cs():
    return R1CS(SQUARE_L, SQUARE_R, SQUARE_O)


@pytest.fixture
def square_witness():
    return Witness([1, 3, 9])
