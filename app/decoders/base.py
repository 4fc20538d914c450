from abc import ABC, abstractmethod


class BaseTextExtractor(ABC):
    """Contract for all document-to-text decoders."""

    @abstractmethod
    def extract(self, content: bytes) -> str:
        """Extract plain text from raw document bytes.

        Args:
            content: Raw file content.

        Returns:
            Extracted text; an empty string when the document holds none.

        Raises:
            DecoderError: if decoding fails for any reason.
        """
