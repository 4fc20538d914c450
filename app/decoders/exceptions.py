class DecoderError(Exception):
    """Raised when a decoder cannot turn document bytes into text."""
