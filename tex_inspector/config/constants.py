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
Constants for TeX Inspector.
"""

from pathlib import Path


class TexInspectorConstants:
    """Constants used throughout the inspector."""

    # Project paths
    PACKAGE_ROOT = Path(__file__).parent.parent

    # Resource paths
    DATA_DIR = PACKAGE_ROOT / "data"
    DEFAULT_PROFILE_PATH = DATA_DIR / "default_profile.yaml"

    # Plugin discovery
    ENTRY_POINT_GROUP = "tex_inspector.inspections"

    # Default values
    DEFAULT_MAX_FILE_SIZE_MB = 10
    DEFAULT_ON_THE_FLY = False

    # Document kinds by file extension
    LATEX_EXTENSIONS = frozenset({".tex", ".sty", ".cls", ".dtx", ".ins", ".tikz"})
    BIBTEX_EXTENSIONS = frozenset({".bib"})

    # Environment variables
    ENV_PROFILE = "TEX_INSPECTOR_PROFILE"
    ENV_ON_THE_FLY = "TEX_INSPECTOR_ON_THE_FLY"
    ENV_MAX_FILE_SIZE_MB = "TEX_INSPECTOR_MAX_FILE_SIZE_MB"

    @classmethod
    def get_default_profile_path(cls) -> Path:
        return cls.DEFAULT_PROFILE_PATH
