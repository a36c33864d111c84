from enum import StrEnum, auto


class DocumentType(StrEnum):
    PDF = auto()
    DOCX = auto()

    @property
    def mime_type(self) -> str:
        return {
            DocumentType.PDF: "application/pdf",
            DocumentType.DOCX: (
                "application/vnd.openxmlformats-officedocument"
                ".wordprocessingml.document"
            ),
        }[self]
