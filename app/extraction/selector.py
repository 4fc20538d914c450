from collections.abc import Mapping, Sequence

from app.extraction.exceptions import NoFileUploadedError
from app.extraction.models import UploadedFile

DEFAULT_FIELD_PRIORITY: tuple[str, ...] = ("file", "resume", "upload")


def select_upload(
    fields: Mapping[str, Sequence[UploadedFile]],
    field_priority: Sequence[str] = DEFAULT_FIELD_PRIORITY,
) -> UploadedFile:
    """Pick the single upload to extract from a parsed form.

    Preferred field names are checked in order; otherwise the first field
    produced by the parser is used. Only the first value of a field counts.

    Raises:
        NoFileUploadedError: if there is no entry or it has no readable file.
    """
    entry = _first_preferred(fields, field_priority)
    if entry is None:
        entry = _first_present(fields)
    if entry is None:
        raise NoFileUploadedError(
            f"No file uploaded (searched fields: {', '.join(field_priority)}, "
            f"received: {', '.join(fields) or 'none'})"
        )
    if entry.file is None:
        raise NoFileUploadedError(
            "No file uploaded: selected form entry is not a file "
            f"(received: {', '.join(fields)})"
        )
    return entry


def _first_preferred(
    fields: Mapping[str, Sequence[UploadedFile]],
    field_priority: Sequence[str],
) -> UploadedFile | None:
    for name in field_priority:
        values = fields.get(name)
        if values:
            return values[0]
    return None


def _first_present(fields: Mapping[str, Sequence[UploadedFile]]) -> UploadedFile | None:
    for values in fields.values():
        if values:
            return values[0]
    return None
