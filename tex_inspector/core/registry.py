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
Inspection registry: the catalog of live inspections keyed by their key.

Architecture
~~~~~~~~~~~~

Inspections come from two sources:

* **Profile references**: ``package.module:ClassName`` entries listed under
  ``inspections:`` in the active profile
* **Entry points**: classes advertised by installed distributions under the
  ``tex_inspector.inspections`` group

At startup the :class:`InspectionLoader` instantiates every referenced class
and the :class:`InspectionRegistry` checks that each derived key is unique.
A key collision is a configuration error and aborts startup; it is never
resolved by dropping one of the inspections.
"""

from __future__ import annotations

import importlib
import logging
from collections.abc import Iterable, Iterator
from importlib.metadata import entry_points

from ..config.constants import TexInspectorConstants
from .exceptions import DuplicateGroupError, DuplicateKeyError, InspectionLoadError
from .inspections.base import Inspection
from .models import InspectionGroup

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------


class InspectionRegistry:
    """Central catalog of all registered inspections.

    The registry is built once at startup and is **read-only** afterwards,
    so it can be shared by concurrent runs without locking.
    """

    def __init__(self) -> None:
        self._inspections: dict[str, Inspection] = {}
        self._groups: dict[str, InspectionGroup] = {}

    # -- Mutation (used during startup) ------------------------------------

    def register(self, inspection: Inspection) -> None:
        """Register *inspection* under its key.

        Raises :class:`DuplicateKeyError` if another inspection already
        produces the same key, and :class:`DuplicateGroupError` if its group
        prefix is already bound to a different group.
        """
        local_id = inspection.get_local_id()
        if not local_id:
            raise ValueError(f"Inspection {type(inspection).__name__} has an empty local id")

        group = inspection.get_group()
        known_group = self._groups.get(group.prefix)
        if known_group is not None and known_group != group:
            raise DuplicateGroupError(
                f"Group prefix '{group.prefix}' is used by both "
                f"'{known_group.display_name}' and '{group.display_name}'"
            )

        key = inspection.get_key()
        existing = self._inspections.get(key)
        if existing is not None:
            if existing is inspection:
                # Same instance re-registered (idempotent)
                return
            raise DuplicateKeyError(key, _describe(existing), _describe(inspection))

        self._groups.setdefault(group.prefix, group)
        self._inspections[key] = inspection
        logger.debug("Registered inspection %s (%s)", key, inspection.get_display_name())

    def register_all(self, inspections: Iterable[Inspection]) -> None:
        for inspection in inspections:
            self.register(inspection)

    # -- Read-only accessors ------------------------------------------------

    def get(self, key: str) -> Inspection | None:
        """Look up an inspection by key."""
        return self._inspections.get(key)

    def keys(self) -> list[str]:
        """Return all keys in registration order."""
        return list(self._inspections)

    def all_inspections(self) -> list[Inspection]:
        """Return all inspections in registration order."""
        return list(self._inspections.values())

    def groups(self) -> dict[str, InspectionGroup]:
        """Return a mapping of prefix → group for all registered groups."""
        return dict(self._groups)

    def __len__(self) -> int:
        return len(self._inspections)

    def __contains__(self, key: object) -> bool:
        return key in self._inspections

    def __iter__(self) -> Iterator[Inspection]:
        return iter(self.all_inspections())


def _describe(inspection: Inspection) -> str:
    cls = type(inspection)
    return f"{cls.__module__}.{cls.__qualname__}"


# ---------------------------------------------------------------------------
# Loader
# ---------------------------------------------------------------------------


class InspectionLoader:
    """Resolves inspection references and builds a populated registry."""

    ENTRY_POINT_GROUP: str = TexInspectorConstants.ENTRY_POINT_GROUP

    def load_reference(self, reference: str) -> Inspection:
        """Instantiate the inspection named by ``module:ClassName``.

        Raises:
            InspectionLoadError: If the reference cannot be resolved to an
                :class:`Inspection` subclass.
        """
        module_name, sep, attr = reference.partition(":")
        if not sep or not module_name or not attr:
            raise InspectionLoadError(f"Invalid inspection reference '{reference}', expected 'module:ClassName'")

        try:
            module = importlib.import_module(module_name)
        except ImportError as exc:
            raise InspectionLoadError(f"Cannot import module '{module_name}': {exc}") from exc

        target = module
        for part in attr.split("."):
            try:
                target = getattr(target, part)
            except AttributeError as exc:
                raise InspectionLoadError(f"Module '{module_name}' has no attribute '{attr}'") from exc

        return self._instantiate(target, reference)

    def load_entry_points(self) -> list[Inspection]:
        """Instantiate every inspection advertised under the entry-point group."""
        inspections: list[Inspection] = []
        for ep in entry_points(group=self.ENTRY_POINT_GROUP):
            try:
                inspections.append(self._instantiate(ep.load(), ep.value))
            except Exception as exc:
                logger.warning("Failed to load inspection entry point '%s': %s", ep.name, exc)
        return inspections

    def discover(
        self,
        references: Iterable[str] | None = None,
        include_entry_points: bool = True,
    ) -> list[Inspection]:
        """Load inspections from entry points first, then explicit references.

        Unresolvable references are logged and skipped.
        """
        inspections: list[Inspection] = []
        if include_entry_points:
            inspections.extend(self.load_entry_points())

        for reference in references or []:
            try:
                inspections.append(self.load_reference(reference))
            except InspectionLoadError as exc:
                logger.warning("Skipping inspection '%s': %s", reference, exc)

        return inspections

    def build_registry(
        self,
        references: Iterable[str] | None = None,
        include_entry_points: bool = True,
    ) -> InspectionRegistry:
        """Convenience: discover inspections and build a populated registry.

        Raises:
            DuplicateKeyError: If two inspections produce the same key.
        """
        registry = InspectionRegistry()
        registry.register_all(self.discover(references, include_entry_points=include_entry_points))
        return registry

    @staticmethod
    def _instantiate(target: object, reference: str) -> Inspection:
        if isinstance(target, Inspection):
            return target
        if isinstance(target, type) and issubclass(target, Inspection):
            try:
                return target()
            except TypeError as exc:
                raise InspectionLoadError(f"Cannot instantiate '{reference}': {exc}") from exc
        raise InspectionLoadError(f"'{reference}' is not an Inspection subclass")
