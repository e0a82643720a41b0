"""
R1CS 제약 시스템과 Witness
============================

**R1CS (Rank-1 Constraint System)**:
  세 개의 계수 행렬 L, R, O 와 witness 벡터 a 에 대해 모든 제약 k 가

    (L·a)_k · (R·a)_k = (O·a)_k

  를 만족하면 a 는 이 R1CS 의 해(witness)이다.

  - 행(row) 수 = 제약 수
  - 행 길이   = witness 길이 (변수 수)
  - 세 행렬 모두 같은 모양이어야 한다

**Witness**:
  a = [1, 출력, 입력..., 중간값...] 형태의 정수 벡터.
  첫 원소는 관례적으로 상수 1 이다.

두 객체 모두 생성 후 변경되지 않는다 (행렬은 tuple 의 tuple 로 저장).

사용 예시:
    >>> r1cs = R1CS([[0, 1, 0]], [[0, 1, 0]], [[0, 0, 1]])   # x · x = y
    >>> r1cs.is_satisfied(Witness([1, 3, 9]))
    True
"""

from pairing_r1cs.errors import DimensionMismatch, MalformedConstraintSystem
from pairing_r1cs.field import FR, encode


def _freeze_matrix(name, matrix):
    rows = tuple(tuple(row) for row in matrix)
    if rows:
        width = len(rows[0])
        for i, row in enumerate(rows):
            if len(row) != width:
                raise MalformedConstraintSystem(
                    f"{name} 행렬의 {i}번째 행 길이가 {len(row)}입니다 (기대값 {width})"
                )
    return rows


def plaintext_dot(row, values):
    """평문 내적 Σ rowᵢ · valuesᵢ 를 FR 위에서 계산한다."""
    total = FR(0)
    for coeff, value in zip(encode(row), encode(values)):
        total = total + coeff * value
    return total


class R1CS:
    """L, R, O 세 행렬로 이루어진 R1CS 인스턴스.

    속성:
        L, R, O: 정수 행렬 (tuple of tuple)
        num_constraints: 제약(행) 수
        num_variables: witness 길이(열 수)

    Raises:
        MalformedConstraintSystem: 행 길이가 들쭉날쭉하거나
            세 행렬의 행/열 수가 서로 다를 때
    """

    def __init__(self, L, R, O):
        self.L = _freeze_matrix("L", L)
        self.R = _freeze_matrix("R", R)
        self.O = _freeze_matrix("O", O)

        row_counts = {len(m) for m in self.matrices}
        if len(row_counts) != 1:
            raise MalformedConstraintSystem(
                f"L, R, O 행 수가 다릅니다: {[len(m) for m in self.matrices]}"
            )

        widths = {len(m[0]) for m in self.matrices if m}
        if len(widths) > 1:
            raise MalformedConstraintSystem(
                f"L, R, O 행 길이가 다릅니다: {[len(m[0]) for m in self.matrices]}"
            )

    @property
    def matrices(self):
        return (self.L, self.R, self.O)

    @property
    def num_constraints(self):
        return len(self.L)

    @property
    def num_variables(self):
        if not self.L:
            return 0
        return len(self.L[0])

    def __eq__(self, other):
        if not isinstance(other, R1CS):
            return NotImplemented
        return self.matrices == other.matrices

    def __hash__(self):
        return hash(self.matrices)

    def __repr__(self):
        return (f"R1CS(constraints={self.num_constraints}, "
                f"variables={self.num_variables})")

    def check_witness(self, witness):
        """witness 길이가 변수 수와 같은지 확인한다.

        Raises:
            DimensionMismatch: 길이가 다를 때
        """
        if len(witness) != self.num_variables:
            raise DimensionMismatch("witness", self.num_variables, len(witness))

    def unsatisfied_constraints(self, witness):
        """평문 witness 로 만족되지 않는 제약의 인덱스 리스트를 반환한다."""
        self.check_witness(witness)
        failed = []
        for k, (l_row, r_row, o_row) in enumerate(zip(self.L, self.R, self.O)):
            left = plaintext_dot(l_row, witness)
            right = plaintext_dot(r_row, witness)
            out = plaintext_dot(o_row, witness)
            if left * right != out:
                failed.append(k)
        return failed

    def is_satisfied(self, witness):
        """(L·a) ⊙ (R·a) == (O·a) 를 평문으로 확인한다.

        암호화된 검증 경로에서는 사용하지 않는다. 제약 시스템을
        만드는 쪽에서 witness 를 점검할 때 쓴다.
        """
        return not self.unsatisfied_constraints(witness)


class Witness:
    """R1CS 의 해 후보 벡터 a.

    속성:
        values: 정수 tuple
    """

    def __init__(self, values):
        self.values = tuple(values)

    def __len__(self):
        return len(self.values)

    def __iter__(self):
        return iter(self.values)

    def __getitem__(self, index):
        return self.values[index]

    def __eq__(self, other):
        if not isinstance(other, Witness):
            return NotImplemented
        return self.values == other.values

    def __hash__(self):
        return hash(self.values)

    def __repr__(self):
        return f"Witness({list(self.values)})"

    @property
    def has_constant_one(self):
        """첫 원소가 상수 1 인지 (관례 확인용)."""
        return bool(self.values) and self.values[0] == 1

    def to_field_elements(self):
        return encode(self.values)

    def replace(self, index, value):
        """index 위치만 value 로 바꾼 새 Witness 를 반환한다."""
        values = list(self.values)
        values[index] = value
        return Witness(values)

    def encrypt(self, group):
        """witness 를 group 위로 암호화한다: [aᵢ·G for aᵢ in a]."""
        return group.encrypt(self.to_field_elements())
