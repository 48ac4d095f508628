"""Curve-agnostic elliptic curve scalars, EC JSON Web Keys and KEM interfaces."""

__version__ = "0.1.0"
__all__ = ["curve", "kem", "scalar", "jwk"]