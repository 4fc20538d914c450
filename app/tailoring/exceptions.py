class TailoringError(Exception):
    """Raised when the model output cannot be turned into a tailoring result."""
