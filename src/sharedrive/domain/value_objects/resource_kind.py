"""Kinds of nodes in the sharing hierarchy."""

from enum import StrEnum


class ResourceKind(StrEnum):
    """Folder or file."""

    FOLDER = "folder"
    FILE = "file"
