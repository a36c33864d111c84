from settings.base import BASE_PATH
from settings.core import core_settings
from settings.summary import summary_settings

__all__ = ["BASE_PATH", "core_settings", "summary_settings"]
