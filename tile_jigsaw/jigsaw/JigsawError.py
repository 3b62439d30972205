class JigsawError(RuntimeError):
    """
    Exception for situations where the tiles can not be read or assembled.
    """
    pass

# ----------------------------------------------------------------------------------------------------------------------
