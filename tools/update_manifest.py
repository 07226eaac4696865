from __future__ import annotations

import argparse
import logging
from typing import Any, Dict, List, Optional

from pkgsync.collect.artifacts import collect_artifacts
from pkgsync.manifest.updater import update_manifest
from pkgsync.utils.config import AppConfig, UpdaterConfig


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Sync package manifest name and files with build output")
    parser.add_argument("--config", action="append", default=[], help="YAML config, may be given several times")
    parser.add_argument("--root", required=False)
    parser.add_argument("--manifest", required=False, help="manifest path relative to --root")
    parser.add_argument("--name", required=False)
    parser.add_argument("--ext", action="append", dest="extensions", required=False)
    parser.add_argument("--posix-paths", action=argparse.BooleanOptionalAction, default=None)
    parser.add_argument("--verbose", action="store_true")
    return parser.parse_args(argv)


def _cli_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    updater: Dict[str, Any] = {}
    for key in ("root", "manifest", "name", "extensions", "posix_paths"):
        value = getattr(args, key)
        if value is not None:
            updater[key] = value
    return {"updater": updater}


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="[%(asctime)s] %(levelname)s - %(message)s",
    )

    cfg = AppConfig.from_files(*args.config).with_overrides(_cli_overrides(args))
    updater_cfg = UpdaterConfig.from_app_config(cfg)

    artifacts = collect_artifacts(updater_cfg.root, updater_cfg.extensions)
    manifest = update_manifest(
        updater_cfg.manifest_path,
        updater_cfg.name,
        artifacts,
        updater_cfg.root,
        posix=updater_cfg.posix_paths,
    )

    print(f"Updated {updater_cfg.manifest_path} (name={manifest['name']}, files={len(manifest['files'])})")


if __name__ == "__main__":
    main()
