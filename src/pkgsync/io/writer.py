from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Invalid JSON constant {name!r}.")


class ManifestWriter:
    def __init__(self, manifest_path: str | Path) -> None:
        self.manifest_path = Path(manifest_path)

    def read(self) -> Dict[str, Any]:
        with open(self.manifest_path, "r", encoding="utf-8") as f:
            # NaN and Infinity are not JSON.
            data = json.load(f, parse_constant=_reject_constant)
        if not isinstance(data, dict):
            raise ValueError(
                f"Manifest {self.manifest_path} must contain a JSON object, got {type(data).__name__}."
            )
        return data

    def write(self, manifest: Dict[str, Any]) -> None:
        # Overwrites in place; an interrupted write leaves a truncated file.
        with open(self.manifest_path, "w", encoding="utf-8") as f:
            json.dump(manifest, f, ensure_ascii=False, indent=2, allow_nan=False)
