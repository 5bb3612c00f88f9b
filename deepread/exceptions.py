class DeepReadError(Exception):
    """Base exception for every failure a submission can end with."""
