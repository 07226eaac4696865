from __future__ import annotations

import logging
import os
import stat
from typing import Iterable, List


logger = logging.getLogger(__name__)


def _has_extension(name: str, extensions: Iterable[str]) -> bool:
    return os.path.splitext(name)[1] in extensions


def collect_artifacts(root: str, extensions: Iterable[str]) -> List[str]:
    """Recursively collect files under ``root`` whose extension is in ``extensions``.

    Files found in subdirectories come before the files of the directory being
    listed; within a level the order is whatever ``os.listdir`` returns.
    Listing or stat errors propagate unchanged.
    """
    extensions = frozenset(extensions)
    found: List[str] = []
    _walk(root, extensions, found)
    return found


def _walk(directory: str, extensions: frozenset, found: List[str]) -> None:
    entries = os.listdir(directory)
    subdirs: List[str] = []
    matches: List[str] = []
    for name in entries:
        path = os.path.join(directory, name)
        # os.stat follows symlinks; there is no cycle protection.
        if stat.S_ISDIR(os.stat(path).st_mode):
            subdirs.append(path)
        elif _has_extension(name, extensions):
            matches.append(path)

    for subdir in subdirs:
        _walk(subdir, extensions, found)

    logger.debug("%s: %d artifact(s)", directory, len(matches))
    found.extend(matches)
