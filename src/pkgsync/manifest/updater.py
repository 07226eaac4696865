from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, Iterable, List

from pkgsync.io.writer import ManifestWriter


logger = logging.getLogger(__name__)


def relative_files(artifact_paths: Iterable[str], root: str, posix: bool = False) -> List[str]:
    """Strip ``root`` from each artifact path."""
    files: List[str] = []
    for path in artifact_paths:
        rel = os.path.relpath(path, root)
        if posix:
            rel = rel.replace(os.sep, "/")
        files.append(rel)
    return files


def update_manifest(
    manifest_path: str | Path,
    name: str,
    artifact_paths: Iterable[str],
    root: str,
    posix: bool = False,
) -> Dict[str, Any]:
    """Rewrite the ``name`` and ``files`` fields of a JSON manifest in place.

    Every other key is written back untouched. The manifest is parsed before
    anything is written, so a read or parse failure leaves the file as it was.
    """
    writer = ManifestWriter(manifest_path)
    manifest = writer.read()

    manifest["name"] = name
    manifest["files"] = relative_files(artifact_paths, root, posix=posix)
    logger.debug("%s: name=%s, %d file(s)", manifest_path, name, len(manifest["files"]))

    writer.write(manifest)
    return manifest
