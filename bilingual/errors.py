# -*- coding: utf-8 -*-
"""Exceptions raised by the bilingual data tools."""
from typing import List, Optional


class BibleDataError(Exception):
    pass


class MalformedNodeError(BibleDataError, ValueError):
    """A tree node (or child collection) is not shaped like a person record."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


class StructureMismatchError(BibleDataError):
    def __init__(self, differences: List[str]):
        self.differences = list(differences)
        head = "; ".join(self.differences[:5])
        more = len(self.differences) - 5
        if more > 0:
            head += f" (+{more} more)"
        super().__init__(f"English and Telugu trees differ in shape: {head}")


class ConfigError(BibleDataError, ValueError):
    pass


class ArtifactError(BibleDataError):
    """A persisted JSON artifact could not be read or has the wrong shape."""

    def __init__(self, path: str, reason: str, cause: Optional[BaseException] = None):
        self.path = path
        self.reason = reason
        self.cause = cause
        super().__init__(f"{path}: {reason}")
