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
Host-level runner that applies every enabled inspection to documents.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable
from pathlib import Path

from .dispatcher import InspectionDispatcher, InspectionOutcome
from .exceptions import DocumentLoadError
from .inspections.base import Inspection
from .loader import DocumentLoader
from .models import AnalysisContext, Document, DocumentReport, Report
from .profile import InspectionProfile
from .registry import InspectionRegistry

logger = logging.getLogger(__name__)


class InspectionRunner:
    """Runs the registered inspections over documents.

    Runs are sequential; the runner keeps no per-document state, so hosts
    may call it from several threads at once.
    """

    def __init__(
        self,
        registry: InspectionRegistry,
        profile: InspectionProfile | None = None,
        dispatcher: InspectionDispatcher | None = None,
        loader: DocumentLoader | None = None,
    ):
        """
        Initialize runner.

        Args:
            registry: Registered inspections
            profile: Inspection profile. If None, loads built-in defaults.
            dispatcher: Dispatcher to use. If None, one is built from the
                profile's supported kinds.
            loader: Document loader. If None, one is built from the
                profile's file size limit.
        """
        self.registry = registry
        self.profile = profile or InspectionProfile.default()
        self.dispatcher = dispatcher or InspectionDispatcher(self.profile.supported_kinds)
        self.loader = loader or DocumentLoader(max_file_size_mb=self.profile.max_file_size_mb)

        for key in sorted(self.profile.unknown_keys(registry)):
            logger.warning("Profile disables unknown inspection '%s'", key)

    def enabled_inspections(self) -> list[Inspection]:
        return [inspection for inspection in self.registry if self.profile.is_enabled(inspection.get_key())]

    def inspect_document(self, document: Document, context: AnalysisContext | None = None) -> DocumentReport:
        """
        Run every enabled inspection against a loaded document.

        Args:
            document: The document to inspect
            context: Run flags. If None, an on-the-fly context is used.

        Returns:
            DocumentReport with one outcome per enabled inspection
        """
        context = context or AnalysisContext()
        start_time = time.time()

        report = DocumentReport(
            path=str(document.path),
            kind=document.kind,
            applicable=self.dispatcher.is_supported(document),
        )
        if not report.applicable:
            logger.debug("Skipping %s: unsupported document kind %s", document.path, document.kind.value)

        for inspection in self.enabled_inspections():
            key = inspection.get_key()
            try:
                outcome = self.dispatcher.run(inspection, document, context)
            except Exception as e:
                # Non-conforming rule: AnalysisFailure is the only expected exception
                logger.exception("Inspection %s raised unexpectedly on %s", key, document.path)
                outcome = InspectionOutcome.failed(f"{type(e).__name__}: {e}")
            report.outcomes[key] = outcome

        report.duration_seconds = time.time() - start_time
        return report

    def inspect_path(self, path: str | Path, context: AnalysisContext | None = None) -> DocumentReport:
        """
        Load and inspect a single file.

        Raises:
            DocumentLoadError: If the file cannot be loaded
        """
        document = self.loader.load_document(path)
        return self.inspect_document(document, context)

    def inspect_paths(
        self,
        paths: Iterable[str | Path],
        context: AnalysisContext | None = None,
        recursive: bool = False,
    ) -> Report:
        """
        Inspect files and directories.

        Directories are expanded through the loader. Files that cannot be
        loaded are logged and recorded on the report.
        """
        report = Report()
        for path in self._expand(paths, recursive, report):
            try:
                report.add_document(self.inspect_path(path, context))
            except DocumentLoadError as e:
                logger.warning("Failed to load %s: %s", path, e)
                report.load_errors[str(path)] = str(e)
        return report

    def _expand(self, paths: Iterable[str | Path], recursive: bool, report: Report) -> list[Path]:
        expanded: list[Path] = []
        for raw in paths:
            path = Path(raw)
            if path.is_dir():
                expanded.extend(self.loader.discover(path, recursive=recursive))
            elif path.exists():
                expanded.append(path)
            else:
                logger.warning("Path does not exist: %s", path)
                report.load_errors[str(path)] = "Path does not exist"
        return expanded
