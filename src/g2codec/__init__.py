"""
Python library for validating, encoding, decoding, and operating on points
in the G2 subgroup of the BLS12-381 pairing-friendly elliptic curve.

This module gives users direct access to the :obj:`~g2codec.bls12381`
module and its associated classes and methods.
"""
from g2codec import bls12381
