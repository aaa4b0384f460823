# Copyright 2026 Cisco Systems, Inc. and its affiliates
# SPDX-License-Identifier: Apache-2.0

"""
Inspections used by the test-suite.

They live in an importable module so that ``module:ClassName`` references can
be resolved by :class:`InspectionLoader`.
"""

from __future__ import annotations

import re

from tex_inspector.core.exceptions import AnalysisFailure
from tex_inspector.core.groups import LATEX
from tex_inspector.core.inspections.base import Inspection
from tex_inspector.core.models import AnalysisContext, Document, HighlightType, InspectionGroup, ProblemDescriptor

LTX = InspectionGroup(prefix="LTX", display_name="LaTeX")

_UNESCAPED_AMPERSAND = re.compile(r"(?<!\\)&")


class UnescapedAmpersandInspection(Inspection):
    """Flags every unescaped ``&``; documents containing a ``tabular`` are skipped entirely."""

    def get_group(self) -> InspectionGroup:
        return LTX

    def get_local_id(self) -> str:
        return "UnescapedAmpersand"

    def get_display_name(self) -> str:
        return "Unescaped ampersand"

    def analyze(self, document: Document, context: AnalysisContext) -> list[ProblemDescriptor]:
        problems = self.descriptor_list()
        if "\\begin{tabular}" in document.text:
            return problems
        for match in _UNESCAPED_AMPERSAND.finditer(document.text):
            problems.append(
                context.problem(
                    document,
                    match.start(),
                    match.end(),
                    "Unescaped ampersand",
                    HighlightType.GENERIC_ERROR,
                )
            )
        return problems


class ShadowingAmpersandInspection(UnescapedAmpersandInspection):
    """A second class producing the same key."""

    def get_display_name(self) -> str:
        return "Ampersand (copy)"


class TodoCommentInspection(Inspection):
    """Flags ``% TODO`` comments."""

    def get_group(self) -> InspectionGroup:
        return LATEX

    def get_local_id(self) -> str:
        return "TodoComment"

    def get_display_name(self) -> str:
        return "TODO comment"

    def analyze(self, document: Document, context: AnalysisContext) -> list[ProblemDescriptor]:
        problems = self.descriptor_list()
        start = document.text.find("% TODO")
        while start != -1:
            problems.append(context.problem(document, start, start + 6, "TODO left in document", HighlightType.WEAK_WARNING))
            start = document.text.find("% TODO", start + 1)
        return problems


class BrokenInspection(Inspection):
    """Always fails."""

    def get_group(self) -> InspectionGroup:
        return LATEX

    def get_local_id(self) -> str:
        return "Broken"

    def get_display_name(self) -> str:
        return "Broken"

    def analyze(self, document: Document, context: AnalysisContext) -> list[ProblemDescriptor]:
        raise AnalysisFailure("internal rule error")


class NeedsArgumentsInspection(TodoCommentInspection):
    def __init__(self, local_id: str):
        self._local_id = local_id

    def get_local_id(self) -> str:
        return self._local_id


class NotAnInspection:
    pass


SHARED_INSTANCE = TodoCommentInspection()
