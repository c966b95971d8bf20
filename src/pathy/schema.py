"""
Data passed between the native layer, the doctor and the renderers.

Diagnostics is the only type produced by the native layer; the rest
describe path-list problems found by the doctor.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, model_validator


# --- Native layer ---


class EntryType(str, Enum):
    PIPE = "pipe"
    DEVICE = "device"
    DIRECTORY = "directory"
    FILE = "file"
    SYMBOLIC_LINK = "symbolic link"
    SOCKET = "socket"
    UNKNOWN = "unknown"


class Diagnostics(BaseModel):
    """Result of classifying one path: either type + flag, or an error message."""

    type: Optional[EntryType] = None
    is_world_writable: Optional[bool] = None
    error: Optional[str] = None

    model_config = {"extra": "forbid", "frozen": True}

    @model_validator(mode="after")
    def _type_or_error(self) -> "Diagnostics":
        classified = self.type is not None and self.is_world_writable is not None
        if self.error is not None:
            if self.type is not None or self.is_world_writable is not None:
                raise ValueError("diagnostics cannot carry both a classification and an error")
        elif not classified:
            raise ValueError("diagnostics need either type and is_world_writable, or error")
        return self

    @property
    def ok(self) -> bool:
        return self.error is None


# --- Path variables ---


class KnownPathVar(BaseModel):
    """A list-valued environment variable pathy knows about."""

    name: str
    subdirs: bool = False
    extensions: List[str] = Field(default_factory=list)


# --- Doctor ---


class Severity(str, Enum):
    STYLE = "style"
    SECURITY = "security"


class Problem(BaseModel):
    severity: Severity
    message: str


class EntryReport(BaseModel):
    """Problems found for one path entry (index is its position in the raw list)."""

    index: int
    entry: str
    problems: List[Problem] = Field(default_factory=list)


class DoctorReport(BaseModel):
    var: str
    entries: List[EntryReport] = Field(default_factory=list)

    @property
    def total(self) -> int:
        return sum(len(e.problems) for e in self.entries)
