from app.decoders.base import BaseTextExtractor


class PlainTextAdapter(BaseTextExtractor):
    """Reads plain-text uploads as UTF-8.

    Invalid byte sequences become U+FFFD instead of failing the request.
    """

    def extract(self, content: bytes) -> str:
        return content.decode("utf-8", errors="replace")
