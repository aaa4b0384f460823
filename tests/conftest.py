# Copyright 2026 Cisco Systems, Inc. and its affiliates
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
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest before running tests.
All fixtures defined here are available to every test module without
explicit imports.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import pytest

from tex_inspector.core.inspections.base import Inspection
from tex_inspector.core.models import (
    AnalysisContext,
    Document,
    DocumentKind,
    HighlightType,
    InspectionGroup,
    ProblemDescriptor,
)
from tex_inspector.core.profile import InspectionProfile
from tex_inspector.core.registry import InspectionRegistry

LTX = InspectionGroup(prefix="LTX", display_name="LaTeX")


class StubInspection(Inspection):
    """Inspection returning canned problems and counting ``analyze`` calls."""

    def __init__(
        self,
        local_id: str = "Stub",
        group: InspectionGroup = LTX,
        problems: Sequence[ProblemDescriptor] = (),
        error: Exception | None = None,
    ):
        self._local_id = local_id
        self._group = group
        self._problems = list(problems)
        self._error = error
        self.calls = 0

    def get_group(self) -> InspectionGroup:
        return self._group

    def get_local_id(self) -> str:
        return self._local_id

    def get_display_name(self) -> str:
        return f"Stub {self._local_id}"

    def analyze(self, document: Document, context: AnalysisContext) -> list[ProblemDescriptor]:
        self.calls += 1
        if self._error is not None:
            raise self._error
        return list(self._problems)


# ---------------------------------------------------------------------------
# Factory fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def make_document(tmp_path: Path):
    """Factory fixture for in-memory :class:`Document` objects.

    Usage::

        doc = make_document("Tom & Jerry")
        txt = make_document("notes", kind=DocumentKind.PLAIN_TEXT, name="notes.txt")
    """

    def _make(text: str = "", kind: DocumentKind = DocumentKind.LATEX, name: str = "main.tex") -> Document:
        return Document(path=tmp_path / name, text=text, kind=kind)

    return _make


@pytest.fixture
def make_problem():
    """Factory fixture for :class:`ProblemDescriptor` objects."""

    def _make(message: str = "problem", start: int = 0, end: int = 1) -> ProblemDescriptor:
        return ProblemDescriptor(
            file_path="main.tex",
            start_offset=start,
            end_offset=end,
            message=message,
            highlight_type=HighlightType.WARNING,
            line_number=1,
        )

    return _make


@pytest.fixture
def make_inspection():
    """Factory fixture for :class:`StubInspection` objects.

    Usage::

        inspection = make_inspection("Broken", error=AnalysisFailure("boom"))
    """

    def _make(local_id: str = "Stub", **kwargs) -> StubInspection:
        return StubInspection(local_id, **kwargs)

    return _make


@pytest.fixture
def context() -> AnalysisContext:
    return AnalysisContext(on_the_fly=True)


@pytest.fixture
def empty_profile() -> InspectionProfile:
    """Profile with nothing disabled and LaTeX as the only supported kind."""
    return InspectionProfile(profile_name="test")


@pytest.fixture
def registry() -> InspectionRegistry:
    return InspectionRegistry()
