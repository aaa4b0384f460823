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
Configuration class for TeX Inspector.

Process-level settings; rule selection lives in the inspection profile.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import dotenv_values

from .constants import TexInspectorConstants

logger = logging.getLogger(__name__)

_TRUE_VALUES = ("true", "1", "yes")
_FALSE_VALUES = ("false", "0", "no")


@dataclass
class Config:
    """
    Configuration for TeX Inspector.
    """

    # Path to an inspection profile YAML (None = built-in default)
    profile_path: str | None = None

    # Incremental editor pass vs. full batch pass
    on_the_fly: bool = TexInspectorConstants.DEFAULT_ON_THE_FLY

    # Documents larger than this are not loaded
    max_file_size_mb: int = TexInspectorConstants.DEFAULT_MAX_FILE_SIZE_MB

    def __post_init__(self):
        """Load configuration from environment variables if not provided."""

        if self.profile_path is None:
            self.profile_path = os.getenv(TexInspectorConstants.ENV_PROFILE) or None

        on_the_fly = os.getenv(TexInspectorConstants.ENV_ON_THE_FLY, "").lower()
        if on_the_fly in _TRUE_VALUES:
            self.on_the_fly = True
        elif on_the_fly in _FALSE_VALUES:
            self.on_the_fly = False

        if self.max_file_size_mb == TexInspectorConstants.DEFAULT_MAX_FILE_SIZE_MB:
            if env_size := os.getenv(TexInspectorConstants.ENV_MAX_FILE_SIZE_MB):
                try:
                    self.max_file_size_mb = int(env_size)
                except ValueError:
                    logger.warning(
                        "Ignoring invalid %s=%r", TexInspectorConstants.ENV_MAX_FILE_SIZE_MB, env_size
                    )

    @classmethod
    def from_env(cls) -> "Config":
        """
        Create configuration from environment variables.

        Returns:
            Config instance with values from environment
        """
        return cls()

    @classmethod
    def from_file(cls, config_file: Path) -> "Config":
        """
        Load configuration from .env file.

        Values already present in the environment take precedence.

        Args:
            config_file: Path to .env file

        Returns:
            Config instance
        """
        if config_file.exists():
            for key, value in dotenv_values(config_file).items():
                if value is not None:
                    os.environ.setdefault(key, value)

        return cls.from_env()
