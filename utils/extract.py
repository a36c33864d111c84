import io

from docx import Document
from pypdf import PdfReader

from enums import DocumentType


def extract_pdf_text(content: bytes) -> str:
    reader = PdfReader(io.BytesIO(content))
    return "\n".join(page.extract_text() or "" for page in reader.pages)


def extract_docx_text(content: bytes) -> str:
    document = Document(io.BytesIO(content))
    return "\n".join(paragraph.text for paragraph in document.paragraphs)


def extract_text(content: bytes, document_type: DocumentType) -> str:
    """Extract plain text from the document bytes.

    Args:
        content: The raw file content.
        document_type: The document type.

    Returns:
        The extracted text, not yet cleaned.

    """
    if document_type == DocumentType.PDF:
        return extract_pdf_text(content=content)

    return extract_docx_text(content=content)
