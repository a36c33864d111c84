from constants.document import MEBIBYTE
from constants.summary import EMPTY_PAYLOAD

__all__ = ["EMPTY_PAYLOAD", "MEBIBYTE"]
