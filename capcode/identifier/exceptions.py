class GenerationError(Exception):
    """Raised when the randomness source cannot produce an identifier.

    Treated as fatal: callers report it and never retry.
    """
