import json
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, Tuple

import yaml


def parse_frontmatter(file_path: Path) -> Tuple[Dict[str, Any], str]:
    """
    Parses a Markdown file with YAML frontmatter.
    Returns (metadata_dict, content_string).
    """
    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {file_path}")

    with open(file_path, "r", encoding="utf-8") as f:
        content = f.read()

    if content.startswith("---"):
        try:
            parts = content.split("---", 2)
            if len(parts) >= 3:
                # parts[0] is empty, parts[1] is yaml, parts[2] is content
                metadata = yaml.safe_load(parts[1])
                body = parts[2].lstrip()  # remove leading newline
                if metadata is None:
                    metadata = {}
                return metadata, body
        except yaml.YAMLError:
            pass  # Fallback if yaml parsing fails

    # No frontmatter or parse error
    return {}, content


def atomic_write_json(path: Path, payload: Any) -> None:
    """Write JSON to a sibling temp file, then replace ``path`` in one step.

    Readers see either the previous file or the complete new one.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(
        prefix=f".{path.name}.", suffix=".tmp", dir=str(path.parent)
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(payload, f, ensure_ascii=False, indent=2)
        os.replace(tmp_name, path)
    except BaseException:
        try:
            os.unlink(tmp_name)
        except FileNotFoundError:
            pass
        raise


def file_mtime_ms(path: Path) -> float:
    """Modification time in milliseconds, full filesystem resolution."""
    return path.stat().st_mtime_ns / 1_000_000


__all__ = ["parse_frontmatter", "atomic_write_json", "file_mtime_ms"]
