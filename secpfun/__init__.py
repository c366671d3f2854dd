"""Arithmetic on the secp256k1 curve, with tagged hashing, nonces and polynomials."""

__version__ = "0.1.0"
__all__ = ["backend", "hash", "hex", "markers", "nonce", "op", "poly", "scalar", "slice"]