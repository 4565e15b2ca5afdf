class ArrayUtilsError(Exception):
    """Base class for caller contract violations raised by arrayutils."""
