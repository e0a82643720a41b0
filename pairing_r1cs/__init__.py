"""
암호화된 witness 에 대한 R1CS 만족 여부 검사 (BN254 페어링)
============================================================

    >>> from pairing_r1cs import R1CS, Witness, encrypt_witness, verify
    >>> a_g1, a_g2 = encrypt_witness(witness)
    >>> verify(r1cs, a_g1, a_g2).satisfied
"""

from pairing_r1cs.errors import R1CSError, DimensionMismatch, MalformedConstraintSystem
from pairing_r1cs.field import FR, encode, to_field_element, to_field_elements
from pairing_r1cs.curve import G1, G2, CurveGroup, ec_pairing
from pairing_r1cs.r1cs import R1CS, Witness, plaintext_dot
from pairing_r1cs.linear_combination import linear_combine, ec_dot_product
from pairing_r1cs.pairing import hadamard_pairing, check_equality_discrete_logs
from pairing_r1cs.verifier import VerificationResult, encrypt_witness, verify, check_r1cs
