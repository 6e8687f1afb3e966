from .directory import DirectoryBaselineSource
from .remote import HttpBaselineSource

__all__ = ["DirectoryBaselineSource", "HttpBaselineSource"]
