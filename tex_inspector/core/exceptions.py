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

"""TeX Inspector exceptions.

All exceptions inherit from TexInspectorError for easy catching.

Example:
    >>> from tex_inspector.core.registry import InspectionRegistry
    >>> from tex_inspector.core.exceptions import DuplicateKeyError
    >>>
    >>> registry = InspectionRegistry()
    >>>
    >>> try:
    ...     registry.register_all(inspections)
    ... except DuplicateKeyError as e:
    ...     print(f"Rule set misconfigured: {e}")
"""


class TexInspectorError(Exception):
    """Base exception for all TeX Inspector errors."""

    pass


class DuplicateKeyError(TexInspectorError):
    """Raised when two registered inspections resolve to the same key.

    The key is the persisted identity of a rule, so a collision is a
    configuration error of the rule set and is fatal at startup.
    """

    def __init__(self, key: str, existing: str, duplicate: str):
        self.key = key
        self.existing = existing
        self.duplicate = duplicate
        super().__init__(f"Inspection key collision: '{key}' is produced by both {existing} and {duplicate}")


class DuplicateGroupError(TexInspectorError):
    """Raised when two different inspection groups share a prefix."""

    pass


class AnalysisFailure(TexInspectorError):
    """Raised by an inspection when its analysis cannot complete.

    The dispatcher recovers from it: the failing inspection contributes no
    problems for that document and the rest of the run continues.
    """

    pass


class InspectionLoadError(TexInspectorError):
    """Raised when an inspection reference cannot be resolved.

    This can indicate:
    - Malformed ``module:ClassName`` reference
    - Missing module or attribute
    - Attribute that is not an Inspection subclass
    """

    pass


class DocumentLoadError(TexInspectorError):
    """Raised when a document cannot be read from disk."""

    pass
