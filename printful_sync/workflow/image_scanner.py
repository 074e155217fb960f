"""
Local artwork discovery.

Lists a directory (non-recursive) for image files by suffix.
Matching is case-sensitive: ".PNG" and ".jpeg" are not picked up
unless listed in the configured extensions.
"""

import logging
import os
from pathlib import Path
from typing import Iterable, List

from ..common.constants import FALLBACK_CONTENT_TYPE, IMAGE_CONTENT_TYPES

logger = logging.getLogger(__name__)


def find_image_files(directory: str | Path, extensions: Iterable[str]) -> List[str]:
    """
    Return names of regular files in directory ending with one of extensions.

    Order is the directory iteration order of the OS (os.scandir), not sorted.
    """
    suffixes = tuple(extensions)
    matches = []
    with os.scandir(directory) as entries:
        for entry in entries:
            if entry.is_file() and entry.name.endswith(suffixes):
                matches.append(entry.name)

    logger.debug("Found %d image file(s) in %s: %s", len(matches), directory, matches)
    return matches


def content_type_for(filename: str) -> str:
    """Multipart content type for an artwork file, by extension."""
    suffix = Path(filename).suffix.lower()
    return IMAGE_CONTENT_TYPES.get(suffix, FALLBACK_CONTENT_TYPE)
