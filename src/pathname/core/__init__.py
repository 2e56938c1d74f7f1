"""Core value type and the filesystem queries it runs."""

from .pathname import Pathname, StrPath
from .ports import FileSystemGateway, QueryCallback
from .queries import Query

__all__ = [
    "FileSystemGateway",
    "Pathname",
    "Query",
    "QueryCallback",
    "StrPath",
]
