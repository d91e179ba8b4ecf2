"""The Ristretto group over Curve25519, with field and scalar arithmetic."""

__version__ = "0.1.0"