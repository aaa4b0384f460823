# Copyright 2026 Cisco Systems, Inc. and its affiliates
# SPDX-License-Identifier: Apache-2.0

"""
Inspection registry and loader tests.

1. **Unit tests** for InspectionRegistry key uniqueness and accessors.
2. **Loader tests** resolving ``module:ClassName`` references and entry points.
"""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest

import sample_inspections
from sample_inspections import (
    ShadowingAmpersandInspection,
    TodoCommentInspection,
    UnescapedAmpersandInspection,
)
from tex_inspector.core.exceptions import DuplicateGroupError, DuplicateKeyError, InspectionLoadError
from tex_inspector.core.models import InspectionGroup
from tex_inspector.core.registry import InspectionLoader, InspectionRegistry

# ===========================================================================
# 1. Registry
# ===========================================================================


class TestInspectionRegistry:
    def test_register_and_retrieve(self, registry):
        inspection = UnescapedAmpersandInspection()
        registry.register(inspection)
        assert "LTXUnescapedAmpersand" in registry
        assert registry.get("LTXUnescapedAmpersand") is inspection
        assert len(registry) == 1

    def test_get_missing_returns_none(self, registry):
        assert registry.get("NOPE") is None

    def test_duplicate_key_raises(self, registry):
        registry.register(UnescapedAmpersandInspection())
        with pytest.raises(DuplicateKeyError) as exc_info:
            registry.register(ShadowingAmpersandInspection())
        assert exc_info.value.key == "LTXUnescapedAmpersand"
        assert "ShadowingAmpersandInspection" in str(exc_info.value)

    def test_duplicate_key_keeps_first_registration(self, registry):
        first = UnescapedAmpersandInspection()
        registry.register(first)
        with pytest.raises(DuplicateKeyError):
            registry.register(UnescapedAmpersandInspection())
        assert registry.get("LTXUnescapedAmpersand") is first
        assert len(registry) == 1

    def test_key_collision_across_groups(self, registry, make_inspection):
        """Prefix "AB" + "C" and prefix "A" + "BC" both give "ABC"."""
        registry.register(make_inspection("C", group=InspectionGroup("AB", "Group AB")))
        with pytest.raises(DuplicateKeyError):
            registry.register(make_inspection("BC", group=InspectionGroup("A", "Group A")))

    def test_same_instance_is_idempotent(self, registry):
        inspection = TodoCommentInspection()
        registry.register(inspection)
        registry.register(inspection)
        assert len(registry) == 1

    def test_conflicting_group_prefix_raises(self, registry, make_inspection):
        registry.register(make_inspection("One", group=InspectionGroup("LTX", "LaTeX")))
        with pytest.raises(DuplicateGroupError):
            registry.register(make_inspection("Two", group=InspectionGroup("LTX", "Something else")))

    def test_equal_groups_share_prefix(self, registry, make_inspection):
        registry.register(make_inspection("One", group=InspectionGroup("LTX", "LaTeX")))
        registry.register(make_inspection("Two", group=InspectionGroup("LTX", "LaTeX")))
        assert list(registry.groups()) == ["LTX"]

    def test_empty_local_id_rejected(self, registry, make_inspection):
        with pytest.raises(ValueError):
            registry.register(make_inspection(""))

    def test_registration_order_preserved(self, registry, make_inspection):
        registry.register_all([make_inspection("B"), make_inspection("A"), make_inspection("C")])
        assert registry.keys() == ["LTXB", "LTXA", "LTXC"]
        assert [i.get_local_id() for i in registry] == ["B", "A", "C"]

    def test_all_keys_unique(self, registry, make_inspection):
        registry.register_all(make_inspection(f"Rule{i}") for i in range(20))
        keys = [inspection.get_key() for inspection in registry.all_inspections()]
        assert len(keys) == len(set(keys)) == 20

    def test_accessors_return_copies(self, registry):
        registry.register(TodoCommentInspection())
        registry.keys().clear()
        registry.all_inspections().clear()
        registry.groups().clear()
        assert len(registry) == 1
        assert registry.groups()


# ===========================================================================
# 2. Loader
# ===========================================================================


class TestInspectionLoader:
    def test_load_reference(self):
        inspection = InspectionLoader().load_reference("sample_inspections:UnescapedAmpersandInspection")
        assert isinstance(inspection, UnescapedAmpersandInspection)

    def test_load_reference_to_instance(self):
        inspection = InspectionLoader().load_reference("sample_inspections:SHARED_INSTANCE")
        assert inspection is sample_inspections.SHARED_INSTANCE

    @pytest.mark.parametrize(
        "reference",
        [
            "sample_inspections",
            ":UnescapedAmpersandInspection",
            "sample_inspections:",
            "no_such_module_xyz:Thing",
            "sample_inspections:Missing",
            "sample_inspections:NotAnInspection",
            "sample_inspections:NeedsArgumentsInspection",
        ],
    )
    def test_bad_references_raise(self, reference):
        with pytest.raises(InspectionLoadError):
            InspectionLoader().load_reference(reference)

    def test_discover_skips_bad_references(self, caplog):
        inspections = InspectionLoader().discover(
            ["sample_inspections:TodoCommentInspection", "no_such_module_xyz:Thing"],
            include_entry_points=False,
        )
        assert [type(i).__name__ for i in inspections] == ["TodoCommentInspection"]
        assert "no_such_module_xyz" in caplog.text

    def test_build_registry(self):
        registry = InspectionLoader().build_registry(
            ["sample_inspections:TodoCommentInspection", "sample_inspections:UnescapedAmpersandInspection"],
            include_entry_points=False,
        )
        assert registry.keys() == ["LatexTodoComment", "LTXUnescapedAmpersand"]

    def test_build_registry_duplicate_key_is_fatal(self):
        with pytest.raises(DuplicateKeyError):
            InspectionLoader().build_registry(
                [
                    "sample_inspections:UnescapedAmpersandInspection",
                    "sample_inspections:ShadowingAmpersandInspection",
                ],
                include_entry_points=False,
            )

    def test_entry_points_loaded_first(self):
        ep = MagicMock()
        ep.name = "ampersand"
        ep.value = "sample_inspections:UnescapedAmpersandInspection"
        ep.load.return_value = UnescapedAmpersandInspection

        with patch("tex_inspector.core.registry.entry_points", return_value=[ep]) as mock_eps:
            registry = InspectionLoader().build_registry(["sample_inspections:TodoCommentInspection"])

        mock_eps.assert_called_once_with(group="tex_inspector.inspections")
        assert registry.keys() == ["LTXUnescapedAmpersand", "LatexTodoComment"]

    def test_broken_entry_point_is_skipped(self, caplog):
        ep = MagicMock()
        ep.name = "broken"
        ep.value = "broken_pkg:Rule"
        ep.load.side_effect = ImportError("no module named broken_pkg")

        with patch("tex_inspector.core.registry.entry_points", return_value=[ep]):
            inspections = InspectionLoader().load_entry_points()

        assert inspections == []
        assert "broken" in caplog.text
