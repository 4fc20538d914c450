from app.config.settings import Settings
from app.decoders.base import BaseTextExtractor
from app.decoders.docx_adapter import DocxAdapter
from app.decoders.pdfplumber_adapter import PdfPlumberAdapter
from app.decoders.pymupdf_adapter import PyMuPdfAdapter
from app.decoders.text_adapter import PlainTextAdapter
from app.extraction.formats import DocumentFormat


class DecoderFactory:
    """Builds the per-format decoder registry from settings."""

    PDF_ADAPTERS: dict[str, type[BaseTextExtractor]] = {
        "pdfplumber": PdfPlumberAdapter,
        "pymupdf": PyMuPdfAdapter,
    }

    @classmethod
    def create(cls, settings: Settings) -> dict[DocumentFormat, BaseTextExtractor]:
        return {
            DocumentFormat.DOCX: DocxAdapter(),
            DocumentFormat.PDF: cls.create_pdf_extractor(settings),
            DocumentFormat.TXT: PlainTextAdapter(),
        }

    @classmethod
    def create_pdf_extractor(cls, settings: Settings) -> BaseTextExtractor:
        engine = settings.pdf_engine.lower()
        adapter_cls = cls.PDF_ADAPTERS.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {list(cls.PDF_ADAPTERS)}"
            )
        return adapter_cls()
