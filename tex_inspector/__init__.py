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
TeX Inspector - Inspection contract and dispatch core for LaTeX linting.
"""

try:
    from ._version import __version__
except ImportError:
    __version__ = "0.0.0+unknown"


def __getattr__(name: str):
    """Lazy-load public API symbols on first access."""
    _lazy_map = {
        "Config": (".config.config", "Config"),
        "TexInspectorConstants": (".config.constants", "TexInspectorConstants"),
        "AnalysisContext": (".core.models", "AnalysisContext"),
        "Document": (".core.models", "Document"),
        "DocumentKind": (".core.models", "DocumentKind"),
        "HighlightType": (".core.models", "HighlightType"),
        "InspectionGroup": (".core.models", "InspectionGroup"),
        "ProblemDescriptor": (".core.models", "ProblemDescriptor"),
        "Report": (".core.models", "Report"),
        "Inspection": (".core.inspections.base", "Inspection"),
        "InspectionDispatcher": (".core.dispatcher", "InspectionDispatcher"),
        "InspectionOutcome": (".core.dispatcher", "InspectionOutcome"),
        "InspectionRegistry": (".core.registry", "InspectionRegistry"),
        "InspectionLoader": (".core.registry", "InspectionLoader"),
        "InspectionProfile": (".core.profile", "InspectionProfile"),
        "InspectionRunner": (".core.runner", "InspectionRunner"),
        "DocumentLoader": (".core.loader", "DocumentLoader"),
        "AnalysisFailure": (".core.exceptions", "AnalysisFailure"),
        "DuplicateKeyError": (".core.exceptions", "DuplicateKeyError"),
    }
    if name in _lazy_map:
        module_path, attr = _lazy_map[name]
        import importlib

        mod = importlib.import_module(module_path, __package__)
        val = getattr(mod, attr)
        # Cache on the module so __getattr__ is only called once per symbol
        globals()[name] = val
        return val
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "Inspection",
    "InspectionGroup",
    "InspectionDispatcher",
    "InspectionOutcome",
    "InspectionRegistry",
    "InspectionLoader",
    "InspectionProfile",
    "InspectionRunner",
    "AnalysisContext",
    "AnalysisFailure",
    "Document",
    "DocumentKind",
    "DocumentLoader",
    "DuplicateKeyError",
    "HighlightType",
    "ProblemDescriptor",
    "Report",
    "Config",
    "TexInspectorConstants",
]
