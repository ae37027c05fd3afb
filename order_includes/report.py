from __future__ import annotations

import json
from typing import List

from pydantic import BaseModel, Field

from .types import FileResult, FileStatus


class FileReport(BaseModel):
    path: str
    status: str  # FileStatus member name, e.g. "DONE"
    message: str

    @classmethod
    def from_result(cls, result: FileResult) -> FileReport:
        return cls(path=str(result.path), status=result.status.name, message=result.message)


class RunReport(BaseModel):
    """JSON report of one run (``--json``)."""
    tool_version: str
    target: str
    files: List[FileReport] = Field(default_factory=list)

    @property
    def processed(self) -> int:
        return len(self.files)

    def count(self, status: FileStatus) -> int:
        return sum(1 for f in self.files if f.status == status.name)

    def to_json(self) -> str:
        """One-line JSON, non-ASCII paths kept readable."""
        return json.dumps(self.model_dump(mode="json"), ensure_ascii=False)


__all__ = ["FileReport", "RunReport"]
