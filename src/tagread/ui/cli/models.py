"""src/tagread/ui/cli/models.py
What: Shared UI-facing data structures for CLI presentation layers.
Why: Provide lightweight value objects without introducing import cycles.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path
from typing import Any

from tagread.shared.track_tag import Tag


class ReadStatus(StrEnum):
    DECODED = "decoded"
    NO_TAG = "no_tag"
    FAILED = "failed"


@dataclass(slots=True, frozen=True)
class ReadResult:
    """Outcome of reading one file."""

    source_path: Path
    status: ReadStatus
    tag: Tag | None = None
    error_message: str | None = None

    @property
    def success(self) -> bool:
        return self.status is not ReadStatus.FAILED

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": str(self.source_path),
            "status": str(self.status),
            "tag": self.tag.to_dict() if self.tag is not None else None,
            "error": self.error_message,
        }


__all__ = ["ReadResult", "ReadStatus"]
