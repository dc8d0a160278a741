class DerivationError(Exception):
    """Raised when the Argon2 primitive rejects the input or parameters."""
