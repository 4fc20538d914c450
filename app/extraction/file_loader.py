from app.extraction.exceptions import FileReadError, FileTooLargeError
from app.extraction.models import UploadedFile


class FileLoader:
    """Reads the bytes of an uploaded file, enforcing the size limit."""

    DEFAULT_MAX_BYTES = 8 * 1024 * 1024
    # Room for multipart boundaries, part headers and small text fields.
    MULTIPART_OVERHEAD_BYTES = 64 * 1024

    def __init__(self, max_bytes: int | None = None) -> None:
        self._max_bytes = max_bytes if max_bytes is not None else self.DEFAULT_MAX_BYTES

    def check_request_size(self, content_length: str | None) -> None:
        """Reject a request body that cannot hold an upload within the limit.

        A missing or malformed Content-Length is left to the per-file check.

        Raises:
            FileTooLargeError: if the declared body is larger than the limit allows.
        """
        try:
            declared = int(content_length or "")
        except ValueError:
            return
        if declared > self._max_bytes + self.MULTIPART_OVERHEAD_BYTES:
            raise FileTooLargeError(
                f"Request body is {declared} bytes; upload limit is {self._max_bytes} bytes"
            )

    def load(self, upload: UploadedFile) -> bytes:
        """Read upload bytes from its temporary stream.

        Raises:
            FileTooLargeError: if the upload exceeds the limit.
            FileReadError: if the stream is missing or cannot be read.
        """
        if upload.size is not None and upload.size > self._max_bytes:
            raise self._too_large(upload, upload.size)
        if upload.file is None:
            raise FileReadError(f"Upload '{upload.original_filename}' has no readable file")
        try:
            upload.file.seek(0)
            content = upload.file.read(self._max_bytes + 1)
        except (OSError, ValueError) as exc:
            raise FileReadError(
                f"Could not read upload '{upload.original_filename}': {exc}"
            ) from exc
        if len(content) > self._max_bytes:
            raise self._too_large(upload, len(content))
        return content

    def _too_large(self, upload: UploadedFile, size: int) -> FileTooLargeError:
        return FileTooLargeError(
            f"Upload '{upload.original_filename}' is {size} bytes; "
            f"limit is {self._max_bytes} bytes"
        )
