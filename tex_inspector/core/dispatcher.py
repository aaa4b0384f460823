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
Compatibility gate and invocation of a single inspection.

The dispatcher answers one question per (inspection, document) pair and
returns an :class:`InspectionOutcome`:

* **absent**: the document kind is out of scope; ``analyze`` never ran.
* **present**: ``analyze`` ran; the problems tuple may be empty.

Hosts rely on the difference to choose between skipping a file silently and
reporting "no issues", so the two states are never collapsed.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from .exceptions import AnalysisFailure
from .inspections.base import Inspection
from .models import AnalysisContext, Document, DocumentKind, ProblemDescriptor

logger = logging.getLogger(__name__)

DEFAULT_SUPPORTED_KINDS: frozenset[DocumentKind] = frozenset({DocumentKind.LATEX})


@dataclass(frozen=True)
class InspectionOutcome:
    """Result of dispatching one inspection against one document."""

    applicable: bool
    problems: tuple[ProblemDescriptor, ...] = ()
    error: str | None = None

    @classmethod
    def absent(cls) -> InspectionOutcome:
        return cls(applicable=False)

    @classmethod
    def present(cls, problems: Iterable[ProblemDescriptor]) -> InspectionOutcome:
        return cls(applicable=True, problems=tuple(problems))

    @classmethod
    def failed(cls, message: str) -> InspectionOutcome:
        """Present and empty, with the failure recorded for the host log."""
        return cls(applicable=True, error=message)

    @property
    def is_absent(self) -> bool:
        return not self.applicable

    @property
    def is_present(self) -> bool:
        return self.applicable

    @property
    def is_failed(self) -> bool:
        return self.error is not None

    def to_dict(self) -> dict[str, Any]:
        if self.is_absent:
            return {"applicable": False}
        data: dict[str, Any] = {
            "applicable": True,
            "problems": [problem.to_dict() for problem in self.problems],
        }
        if self.error is not None:
            data["error"] = self.error
        return data


class InspectionDispatcher:
    """Gate documents by kind and invoke inspections on supported ones.

    The supported-kind check is framework-wide and coarse: it separates
    documents this framework understands from everything else, independent
    of which inspection is being run.
    """

    def __init__(self, supported_kinds: Iterable[DocumentKind] | None = None):
        """
        Initialize dispatcher.

        Args:
            supported_kinds: Document kinds handed to inspections.
                If None, only LaTeX documents are supported.
        """
        if supported_kinds is None:
            self.supported_kinds = DEFAULT_SUPPORTED_KINDS
        else:
            self.supported_kinds = frozenset(DocumentKind(kind) for kind in supported_kinds)

    def is_supported(self, document: Document) -> bool:
        return document.kind in self.supported_kinds

    def run(self, inspection: Inspection, document: Document, context: AnalysisContext) -> InspectionOutcome:
        """
        Run *inspection* against *document* if its kind is supported.

        Args:
            inspection: A registered inspection
            document: The document to inspect
            context: Run flags passed through to the inspection

        Returns:
            Absent outcome for unsupported kinds, otherwise the present
            outcome holding exactly what ``analyze`` produced. An
            :class:`AnalysisFailure` is logged and yields a present, empty,
            failed outcome.
        """
        if not self.is_supported(document):
            return InspectionOutcome.absent()

        try:
            problems = inspection.analyze(document, context)
        except AnalysisFailure as exc:
            logger.warning("Inspection %s failed on %s: %s", inspection.get_key(), document.path, exc)
            return InspectionOutcome.failed(str(exc))

        return InspectionOutcome.present(problems)
