"""Classical ciphers, number theory, public-key schemes and step-by-step AES and DES."""

__version__ = "0.1.0"