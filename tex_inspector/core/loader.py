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
Document loader for TeX Inspector.
"""

import logging
from pathlib import Path

from ..config.constants import TexInspectorConstants
from .exceptions import DocumentLoadError
from .models import Document, DocumentKind

logger = logging.getLogger(__name__)


class DocumentLoader:
    """Reads documents from disk and tags their kind.

    The kind comes from the file extension only; the text is not parsed.
    """

    LATEX_EXTENSIONS = TexInspectorConstants.LATEX_EXTENSIONS
    BIBTEX_EXTENSIONS = TexInspectorConstants.BIBTEX_EXTENSIONS

    def __init__(self, max_file_size_mb: int = TexInspectorConstants.DEFAULT_MAX_FILE_SIZE_MB):
        """
        Initialize document loader.

        Args:
            max_file_size_mb: Maximum file size to read in MB
        """
        self.max_file_size_bytes = max_file_size_mb * 1024 * 1024

    def kind_of(self, path: str | Path) -> DocumentKind:
        suffix = Path(path).suffix.lower()
        if suffix in self.LATEX_EXTENSIONS:
            return DocumentKind.LATEX
        if suffix in self.BIBTEX_EXTENSIONS:
            return DocumentKind.BIBTEX
        return DocumentKind.PLAIN_TEXT

    def load_document(self, path: str | Path) -> Document:
        """
        Load a document from a file.

        Args:
            path: Path to the file

        Returns:
            Document with its kind tag

        Raises:
            DocumentLoadError: If the file is missing, too large or not UTF-8 text
        """
        path = Path(path)
        if not path.is_file():
            raise DocumentLoadError(f"Document does not exist: {path}")

        size = path.stat().st_size
        if size > self.max_file_size_bytes:
            raise DocumentLoadError(f"Document exceeds size limit ({size} bytes): {path}")

        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise DocumentLoadError(f"Failed to read document {path}: {e}") from e

        return Document(path=path, text=text, kind=self.kind_of(path))

    def discover(self, directory: str | Path, recursive: bool = False) -> list[Path]:
        """List regular files under *directory*, skipping hidden entries."""
        directory = Path(directory)
        if not directory.is_dir():
            raise DocumentLoadError(f"Directory does not exist: {directory}")

        candidates = directory.rglob("*") if recursive else directory.iterdir()
        files = []
        for candidate in candidates:
            rel_parts = candidate.relative_to(directory).parts
            if any(part.startswith(".") for part in rel_parts):
                continue
            if candidate.is_file():
                files.append(candidate)
        return sorted(files)
