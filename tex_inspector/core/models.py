# Copyright 2026 Cisco Systems, Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
# SPDX-License-Identifier: Apache-2.0

"""
Data models for inspection groups, documents and reported problems.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .dispatcher import InspectionOutcome


class HighlightType(str, Enum):
    """How the host should highlight a problem. The core attaches no policy to these."""

    GENERIC_ERROR = "GENERIC_ERROR"
    GENERIC_ERROR_OR_WARNING = "GENERIC_ERROR_OR_WARNING"
    WARNING = "WARNING"
    WEAK_WARNING = "WEAK_WARNING"
    INFORMATION = "INFORMATION"


class DocumentKind(str, Enum):
    """Kind tag of a loaded document."""

    LATEX = "latex"
    BIBTEX = "bibtex"
    PLAIN_TEXT = "plain_text"


@dataclass(frozen=True)
class InspectionGroup:
    """Category bucketing related inspections.

    The prefix namespaces every inspection key in the group, so it must stay
    stable: renaming it invalidates persisted settings for all its rules.
    """

    prefix: str
    display_name: str

    def __post_init__(self):
        if not self.prefix:
            raise ValueError("InspectionGroup prefix must be non-empty")

    def get_prefix(self) -> str:
        return self.prefix

    def get_display_name(self) -> str:
        return self.display_name


@dataclass(frozen=True)
class Document:
    """A loaded source document. Inspections read it and never modify it."""

    path: Path
    text: str
    kind: DocumentKind

    def line_of(self, offset: int) -> int:
        """Return the 1-based line number containing *offset*."""
        offset = max(0, min(offset, len(self.text)))
        return self.text.count("\n", 0, offset) + 1


@dataclass(frozen=True)
class ProblemDescriptor:
    """A single issue found by an inspection."""

    file_path: str
    start_offset: int
    end_offset: int
    message: str
    highlight_type: HighlightType = HighlightType.WARNING
    line_number: int | None = None
    on_the_fly: bool = True

    def to_dict(self) -> dict[str, Any]:
        """Convert problem to dictionary."""
        return {
            "file_path": self.file_path,
            "start_offset": self.start_offset,
            "end_offset": self.end_offset,
            "line_number": self.line_number,
            "message": self.message,
            "highlight_type": self.highlight_type.value,
            "on_the_fly": self.on_the_fly,
        }


@dataclass(frozen=True)
class AnalysisContext:
    """Opaque run flags handed to every inspection.

    ``on_the_fly`` is true for incremental editor passes and false for full
    batch runs. Inspections may use it to tune thoroughness only.
    """

    on_the_fly: bool = True

    def problem(
        self,
        document: Document,
        start: int,
        end: int,
        message: str,
        highlight_type: HighlightType = HighlightType.WARNING,
    ) -> ProblemDescriptor:
        """Create a problem descriptor located in *document*."""
        if start < 0 or end < start:
            raise ValueError(f"Invalid problem range [{start}, {end})")
        return ProblemDescriptor(
            file_path=str(document.path),
            start_offset=start,
            end_offset=end,
            message=message,
            highlight_type=highlight_type,
            line_number=document.line_of(start),
            on_the_fly=self.on_the_fly,
        )


@dataclass
class DocumentReport:
    """Outcomes of every enabled inspection for one document."""

    path: str
    kind: DocumentKind
    applicable: bool = True
    outcomes: dict[str, InspectionOutcome] = field(default_factory=dict)
    duration_seconds: float = 0.0

    @property
    def problems(self) -> list[ProblemDescriptor]:
        """All problems, grouped by inspection in run order."""
        return [problem for outcome in self.outcomes.values() for problem in outcome.problems]

    @property
    def failed_inspections(self) -> list[str]:
        return [key for key, outcome in self.outcomes.items() if outcome.is_failed]

    def to_dict(self) -> dict[str, Any]:
        """Convert document report to dictionary."""
        return {
            "path": self.path,
            "kind": self.kind.value,
            "applicable": self.applicable,
            "problems_count": len(self.problems),
            "outcomes": {key: outcome.to_dict() for key, outcome in self.outcomes.items()},
            "failed_inspections": self.failed_inspections,
            "duration_ms": int(self.duration_seconds * 1000),
        }


@dataclass
class Report:
    """Aggregated report from inspecting one or more documents."""

    documents: list[DocumentReport] = field(default_factory=list)
    load_errors: dict[str, str] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=datetime.now)

    def add_document(self, document_report: DocumentReport) -> None:
        self.documents.append(document_report)

    @property
    def total_problems(self) -> int:
        return sum(len(doc.problems) for doc in self.documents)

    @property
    def inspected_count(self) -> int:
        return sum(1 for doc in self.documents if doc.applicable)

    @property
    def skipped_count(self) -> int:
        return sum(1 for doc in self.documents if not doc.applicable)

    def to_dict(self) -> dict[str, Any]:
        """Convert report to dictionary."""
        return {
            "summary": {
                "documents_inspected": self.inspected_count,
                "documents_skipped": self.skipped_count,
                "total_problems": self.total_problems,
                "load_errors": len(self.load_errors),
                "timestamp": self.timestamp.isoformat(),
            },
            "documents": [doc.to_dict() for doc in self.documents],
            "load_errors": dict(self.load_errors),
        }
