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

"""Command-line interface for TeX Inspector."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from ..config.config import Config
from ..config.constants import TexInspectorConstants
from ..core.exceptions import DuplicateGroupError, DuplicateKeyError
from ..core.loader import DocumentLoader
from ..core.models import AnalysisContext, Report
from ..core.profile import InspectionProfile
from ..core.registry import InspectionLoader, InspectionRegistry
from ..core.runner import InspectionRunner

logger = logging.getLogger("tex_inspector.cli")


# ---------------------------------------------------------------------------
# Shared helpers
# ---------------------------------------------------------------------------


def _configure_logging(args: argparse.Namespace) -> None:
    level = logging.DEBUG if getattr(args, "verbose", False) else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _load_profile(args: argparse.Namespace, config: Config) -> InspectionProfile:
    """Load the profile from ``--profile``, the environment, or the default.

    Raises:
        FileNotFoundError: If the named profile does not exist
    """
    profile_path = getattr(args, "profile", None) or config.profile_path
    if profile_path:
        profile = InspectionProfile.from_yaml(profile_path)
        logger.info("Using inspection profile: %s (%s)", profile_path, profile.profile_name)
    else:
        profile = InspectionProfile.default()

    extra = getattr(args, "inspections", None) or []
    profile.inspections = [*profile.inspections, *extra]
    return profile


def _build_registry(args: argparse.Namespace, profile: InspectionProfile) -> InspectionRegistry:
    """Build the registry; key collisions propagate to the caller."""
    loader = InspectionLoader()
    return loader.build_registry(
        profile.inspections,
        include_entry_points=not getattr(args, "no_entry_points", False),
    )


def _startup(args: argparse.Namespace) -> tuple[Config, InspectionProfile, InspectionRegistry] | None:
    """Load config, profile and registry, printing startup errors.

    A ``.env`` file in the working directory is read first; variables already
    set in the environment take precedence.
    """
    config = Config.from_file(Path(".env"))
    try:
        profile = _load_profile(args, config)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error loading profile: {e}", file=sys.stderr)
        return None

    try:
        registry = _build_registry(args, profile)
    except (DuplicateKeyError, DuplicateGroupError) as e:
        print(f"Error: invalid inspection set: {e}", file=sys.stderr)
        return None

    return config, profile, registry


def _generate_summary(report: Report) -> str:
    lines = [
        "=" * 60,
        "TeX Inspector Report",
        "=" * 60,
        f"Documents inspected: {report.inspected_count}",
        f"Documents skipped:   {report.skipped_count}",
        f"Problems:            {report.total_problems}",
    ]
    for doc in report.documents:
        if not doc.applicable:
            continue
        lines.append("")
        lines.append(f"{doc.path}: {len(doc.problems)} problem(s)")
        for key, outcome in doc.outcomes.items():
            for problem in outcome.problems:
                line = problem.line_number if problem.line_number is not None else "?"
                lines.append(f"  {line}: [{problem.highlight_type.value}] {problem.message} ({key})")
            if outcome.is_failed:
                lines.append(f"  inspection {key} failed: {outcome.error}")
    if report.load_errors:
        lines.append("")
        lines.append("Load errors:")
        for path, error in report.load_errors.items():
            lines.append(f"  {path}: {error}")
    return "\n".join(lines)


def _write_output(args: argparse.Namespace, output: str) -> None:
    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(output, encoding="utf-8")
        print(f"Report saved to: {args.output}", file=sys.stderr)
    else:
        print(output)


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def inspect_command(args: argparse.Namespace) -> int:
    """Handle the ``inspect`` command."""
    started = _startup(args)
    if started is None:
        return 1
    config, profile, registry = started

    on_the_fly = config.on_the_fly or args.on_the_fly
    # A size limit set through the environment overrides the profile
    max_file_size_mb = profile.max_file_size_mb
    if config.max_file_size_mb != TexInspectorConstants.DEFAULT_MAX_FILE_SIZE_MB:
        max_file_size_mb = config.max_file_size_mb

    runner = InspectionRunner(registry, profile=profile, loader=DocumentLoader(max_file_size_mb=max_file_size_mb))
    report = runner.inspect_paths(args.paths, AnalysisContext(on_the_fly=on_the_fly), recursive=args.recursive)

    if args.format == "json":
        output = json.dumps(report.to_dict(), indent=None if args.compact else 2)
    else:
        output = _generate_summary(report)
    _write_output(args, output)

    if report.load_errors and not report.documents:
        return 1
    if args.fail_on_problems and report.total_problems > 0:
        return 1
    return 0


def list_inspections_command(args: argparse.Namespace) -> int:
    """Handle the ``list-inspections`` command."""
    started = _startup(args)
    if started is None:
        return 1
    _, profile, registry = started

    if not len(registry):
        print("No inspections registered.")
        return 0

    width = max(len(key) for key in registry.keys())
    for inspection in registry:
        key = inspection.get_key()
        state = "" if profile.is_enabled(key) else " (disabled)"
        print(f"{key:<{width}}  [{inspection.get_group_display_name()}] {inspection.get_display_name()}{state}")
    return 0


def validate_command(args: argparse.Namespace) -> int:
    """Handle the ``validate`` command."""
    started = _startup(args)
    if started is None:
        return 1
    _, profile, registry = started

    unknown = sorted(profile.unknown_keys(registry))
    for key in unknown:
        print(f"Warning: profile disables unknown inspection '{key}'", file=sys.stderr)
    print(f"OK: {len(registry)} inspection(s) in {len(registry.groups())} group(s), all keys unique")
    return 0


def generate_profile_command(args: argparse.Namespace) -> int:
    """Handle the ``generate-profile`` command."""
    profile = InspectionProfile.default()
    profile.to_yaml(args.output)
    print(f"Profile written to: {args.output}")
    return 0


def _add_registry_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--profile", "-p", help="Inspection profile YAML (or set TEX_INSPECTOR_PROFILE)")
    parser.add_argument(
        "--inspection",
        "-i",
        dest="inspections",
        action="append",
        default=[],
        help="Inspection to load as module:ClassName (repeatable)",
    )
    parser.add_argument(
        "--no-entry-points", action="store_true", help="Do not load inspections from installed entry points"
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="TeX Inspector - Run LaTeX inspections over documents",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  tex-inspector inspect thesis.tex
  tex-inspector inspect chapters/ --recursive --format json
  tex-inspector inspect main.tex --inspection my_rules.labels:DuplicateLabelInspection
  tex-inspector list-inspections
  tex-inspector validate --profile tex_inspector.yaml
  tex-inspector generate-profile -o tex_inspector.yaml
        """,
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    # -- inspect -----------------------------------------------------------
    inspect_p = subparsers.add_parser("inspect", help="Inspect documents")
    inspect_p.add_argument("paths", nargs="+", help="Files or directories to inspect")
    inspect_p.add_argument("--recursive", "-r", action="store_true", help="Recurse into directories")
    inspect_p.add_argument("--on-the-fly", action="store_true", help="Run as an incremental pass instead of a batch pass")
    inspect_p.add_argument("--format", choices=["summary", "json"], default="summary", help="Output format")
    inspect_p.add_argument("--compact", action="store_true", help="Compact JSON output")
    inspect_p.add_argument("--output", "-o", help="Output file path")
    inspect_p.add_argument("--fail-on-problems", action="store_true", help="Exit with error if problems are found")
    _add_registry_flags(inspect_p)

    # -- list-inspections --------------------------------------------------
    list_p = subparsers.add_parser("list-inspections", help="List registered inspections and their keys")
    _add_registry_flags(list_p)

    # -- validate ----------------------------------------------------------
    validate_p = subparsers.add_parser("validate", help="Check that all inspection keys are unique")
    _add_registry_flags(validate_p)

    # -- generate-profile --------------------------------------------------
    gp_p = subparsers.add_parser("generate-profile", help="Generate a default inspection profile YAML")
    gp_p.add_argument("--output", "-o", default="tex_inspector.yaml", help="Output file path")

    # -- dispatch ----------------------------------------------------------
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    _configure_logging(args)

    dispatch = {
        "inspect": inspect_command,
        "list-inspections": list_inspections_command,
        "validate": validate_command,
        "generate-profile": generate_profile_command,
    }
    handler = dispatch.get(args.command)
    if handler:
        return handler(args)

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
