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
Inspection profile: which inspections to load, which to skip, and which
document kinds the framework hands to them.

Usage
-----
    from tex_inspector.core.profile import InspectionProfile

    # Load built-in defaults
    profile = InspectionProfile.default()

    # Load a project profile (merges on top of defaults)
    profile = InspectionProfile.from_yaml("tex_inspector.yaml")

    # Dump the current profile for editing
    profile.to_yaml("generated_profile.yaml")

Disabled inspections are listed by key, so a profile stays valid only as long
as the group prefixes and local ids of those inspections do not change.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

import yaml

from ..config.constants import TexInspectorConstants
from .models import DocumentKind

if TYPE_CHECKING:
    from .registry import InspectionRegistry

logger = logging.getLogger(__name__)

_DEFAULT_PROFILE_PATH = TexInspectorConstants.DEFAULT_PROFILE_PATH


@dataclass
class InspectionProfile:
    """Rule selection for an inspection run."""

    profile_name: str = "default"
    supported_kinds: list[DocumentKind] = field(default_factory=lambda: [DocumentKind.LATEX])
    inspections: list[str] = field(default_factory=list)
    disabled_inspections: set[str] = field(default_factory=set)
    max_file_size_mb: int = TexInspectorConstants.DEFAULT_MAX_FILE_SIZE_MB

    def is_enabled(self, key: str) -> bool:
        return key not in self.disabled_inspections

    def unknown_keys(self, registry: InspectionRegistry) -> set[str]:
        """Return disabled keys that match no registered inspection.

        These usually point at a renamed group prefix or local id.
        """
        return {key for key in self.disabled_inspections if key not in registry}

    # -----------------------------------------------------------------------
    # Construction
    # -----------------------------------------------------------------------

    @classmethod
    def default(cls) -> InspectionProfile:
        """Load the built-in default profile."""
        return cls._from_dict(cls._load_default_raw())

    @classmethod
    def from_yaml(cls, path: str | Path) -> InspectionProfile:
        """
        Load a profile from a YAML file.

        The YAML is merged on top of the built-in defaults so that users only
        need to specify the sections they want to override.
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Profile file not found: {path}")

        try:
            with open(path, encoding="utf-8") as fh:
                raw = yaml.safe_load(fh) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid profile YAML {path}: {e}") from e
        if not isinstance(raw, dict):
            raise ValueError(f"Profile file must contain a mapping: {path}")

        merged = dict(cls._load_default_raw())
        merged.update(raw)
        return cls._from_dict(merged)

    def to_yaml(self, path: str | Path) -> None:
        """Dump the full profile to a YAML file for editing."""
        with open(path, "w", encoding="utf-8") as fh:
            fh.write("# TeX Inspector – Inspection Profile\n")
            fh.write("# Only include sections you want to override; omitted sections\n")
            fh.write("# will use the built-in defaults.\n\n")
            yaml.safe_dump(self._to_dict(), fh, default_flow_style=False, sort_keys=False)

    # -----------------------------------------------------------------------
    # Internal parsing
    # -----------------------------------------------------------------------

    @classmethod
    def _load_default_raw(cls) -> dict[str, Any]:
        if _DEFAULT_PROFILE_PATH.exists():
            with open(_DEFAULT_PROFILE_PATH, encoding="utf-8") as fh:
                return yaml.safe_load(fh) or {}
        return {}

    @classmethod
    def _from_dict(cls, d: dict[str, Any]) -> InspectionProfile:
        kinds: list[DocumentKind] = []
        for value in _as_list(d, "supported_kinds"):
            try:
                kinds.append(DocumentKind(str(value).lower()))
            except ValueError:
                logger.warning("Ignoring unknown document kind '%s' in profile", value)

        return cls(
            profile_name=str(d.get("profile_name", "default")),
            supported_kinds=kinds,
            inspections=[str(ref) for ref in _as_list(d, "inspections")],
            disabled_inspections={str(key) for key in _as_list(d, "disabled_inspections")},
            max_file_size_mb=int(d.get("max_file_size_mb", TexInspectorConstants.DEFAULT_MAX_FILE_SIZE_MB)),
        )

    def _to_dict(self) -> dict[str, Any]:
        return {
            "profile_name": self.profile_name,
            "supported_kinds": [kind.value for kind in self.supported_kinds],
            "inspections": list(self.inspections),
            "disabled_inspections": sorted(self.disabled_inspections),
            "max_file_size_mb": self.max_file_size_mb,
        }


def _as_list(d: dict[str, Any], name: str) -> list[Any]:
    """Read a list-valued section; a bare string counts as a single entry."""
    value = d.get(name)
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if not isinstance(value, list):
        raise ValueError(f"Profile section '{name}' must be a list, got {type(value).__name__}")
    return value
