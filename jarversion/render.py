from __future__ import annotations

import json as _json
from typing import Dict, List

from .constants import (
    JSON_IMPLEMENTATION_VERSION,
    JSON_INDENT,
    JSON_MD5,
    JSON_SPECIFICATION_VERSION,
    KEY_IMPLEMENTATION_VERSION,
    KEY_MD5,
    KEY_SPECIFICATION_VERSION,
)
from .manifest import VersionRecord


def record_to_dict(record: VersionRecord) -> Dict[str, str]:
    """Present fields only, in implementation/specification/md5 order."""
    out: Dict[str, str] = {}
    if record.implementation_version:
        out[JSON_IMPLEMENTATION_VERSION] = record.implementation_version
    if record.specification_version:
        out[JSON_SPECIFICATION_VERSION] = record.specification_version
    if record.md5:
        out[JSON_MD5] = record.md5
    return out


def render_json(record: VersionRecord) -> str:
    return _json.dumps(record_to_dict(record), indent=JSON_INDENT, ensure_ascii=False)


def render_lines(record: VersionRecord, md5_sep: str = " ") -> List[str]:
    """Render ``Key: value`` lines, omitting absent fields.

    Args:
        record: Record to render.
        md5_sep: Separator after ``MD5:``. Console output uses two spaces.
    """
    lines: List[str] = []
    if record.implementation_version:
        lines.append(f"{KEY_IMPLEMENTATION_VERSION}: {record.implementation_version}")
    if record.specification_version:
        lines.append(f"{KEY_SPECIFICATION_VERSION}: {record.specification_version}")
    if record.md5:
        lines.append(f"{KEY_MD5}:{md5_sep}{record.md5}")
    return lines
