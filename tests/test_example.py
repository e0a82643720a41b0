"""
Sample constraint system tests (pairing_r1cs.example)
"""
from pairing_r1cs.example import build_r1cs, build_witness, main


class TestBuildWitness:
    def test_values(self):
        """v1=9, v2=54, v3=4, v4=48, z=54+48−6+5=101"""
        assert list(build_witness(3, 2)) == [1, 101, 3, 2, 9, 54, 4, 48]

    def test_other_inputs_satisfy(self):
        r1cs = build_r1cs()
        for x, y in [(0, 0), (1, -1), (-4, 7), (10, 10)]:
            assert r1cs.is_satisfied(build_witness(x, y))

    def test_z_matches_polynomial(self):
        for x, y in [(3, 2), (-2, 5)]:
            z = 2 * x**3 + 4 * x * y**2 - x * y + 5
            assert build_witness(x, y)[1] == z


class TestBuildR1CS:
    def test_shape(self):
        r1cs = build_r1cs()
        assert r1cs.num_constraints == 5
        assert r1cs.num_variables == 8

    def test_constant_row(self):
        assert build_r1cs().O[4] == (5, -1, 0, 0, 0, 1, 0, 1)


class TestDemo:
    def test_main(self, capsys):
        assert main() is True
        out = capsys.readouterr().out
        assert "모든 테스트 통과" in out
        assert "[4]" in out
