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
Base inspection interface every diagnostic rule implements.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..models import AnalysisContext, Document, InspectionGroup, ProblemDescriptor


class Inspection(ABC):
    """Abstract base class for all inspections.

    Instances are created once at registration and shared by every run, so
    ``analyze`` must keep its scratch state local to the call.
    """

    @abstractmethod
    def get_group(self) -> InspectionGroup:
        """Get the group this inspection belongs to."""
        pass

    @abstractmethod
    def get_local_id(self) -> str:
        """Get the identifier of this inspection, unique within its group."""
        pass

    @abstractmethod
    def get_display_name(self) -> str:
        """Get the human-readable name shown in settings."""
        pass

    @abstractmethod
    def analyze(self, document: Document, context: AnalysisContext) -> list[ProblemDescriptor]:
        """
        Inspect a document for problems.

        Args:
            document: The document to inspect. Never modified.
            context: Run flags (on-the-fly vs. batch pass)

        Returns:
            Problems found, in reporting order

        Raises:
            AnalysisFailure: If the analysis cannot complete
        """
        pass

    def get_key(self) -> str:
        """Get the persisted identity of this inspection.

        Stored enable/disable settings are keyed on this value, so neither
        the group prefix nor the local id may change for an existing rule.
        """
        return self.get_group().get_prefix() + self.get_local_id()

    def get_group_display_name(self) -> str:
        return self.get_group().get_display_name()

    @staticmethod
    def descriptor_list() -> list[ProblemDescriptor]:
        """Return a fresh list for collecting problems within one call."""
        return []

    def __repr__(self) -> str:
        return f"{type(self).__name__}(key={self.get_key()!r})"
