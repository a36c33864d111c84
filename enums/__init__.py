from enums.document import DocumentType
from enums.llm import LLMName, Provider
from enums.summary import SummaryPath, SummarySection

__all__ = ["DocumentType", "LLMName", "Provider", "SummaryPath", "SummarySection"]
