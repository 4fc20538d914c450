from starlette.datastructures import FormData
from starlette.datastructures import UploadFile as StarletteUploadFile

from app.extraction.models import UploadedFile


def form_fields(form: FormData) -> dict[str, list[UploadedFile]]:
    """Group parsed form entries by field name, keeping parser order."""
    fields: dict[str, list[UploadedFile]] = {}
    for name, value in form.multi_items():
        fields.setdefault(name, []).append(_to_uploaded_file(value))
    return fields


def _to_uploaded_file(value: StarletteUploadFile | str) -> UploadedFile:
    if isinstance(value, StarletteUploadFile):
        return UploadedFile(
            file=value.file,
            original_filename=value.filename,
            mime_type=value.content_type,
            size=value.size,
        )
    return UploadedFile(file=None)
