class InvalidArgument(ValueError):
    """
    Raised when a caller-supplied value is outside of its documented domain:
    an out-of-range channel, a malformed hex string or an undersized sequence.
    """


class InternalError(RuntimeError):
    """
    Raised when a branch assumed to be exhaustive is not. Valid input never
    reaches this, so seeing it means there is a bug in the conversion code.
    """
