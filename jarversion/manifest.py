from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .constants import KEY_IMPLEMENTATION_VERSION, KEY_SPECIFICATION_VERSION


_IMPL_PREFIX = KEY_IMPLEMENTATION_VERSION + ":"
_SPEC_PREFIX = KEY_SPECIFICATION_VERSION + ":"


@dataclass
class VersionRecord:
    implementation_version: Optional[str] = None
    specification_version: Optional[str] = None
    md5: Optional[str] = None


def decode_manifest(data: bytes) -> str:
    # Manifests are UTF-8; undecodable bytes must not abort parsing.
    return data.decode("utf-8", errors="replace")


def parse_manifest(manifest: str) -> VersionRecord:
    """Extract the version attributes from the text of a MANIFEST.MF.

    Each line is stripped and tested for an exact ``Implementation-Version:``
    or ``Specification-Version:`` prefix. When a key appears more than once the
    last occurrence wins. Everything else, continuation lines included, is
    ignored, so malformed input simply yields an empty record.

    Args:
        manifest: Raw manifest text, newline separated.

    Returns:
        A VersionRecord with the fields that were found; ``md5`` is never set here.
    """
    record = VersionRecord()
    for line in manifest.split("\n"):
        line = line.strip()
        if line.startswith(_IMPL_PREFIX):
            record.implementation_version = line[len(_IMPL_PREFIX):].strip()
        if line.startswith(_SPEC_PREFIX):
            record.specification_version = line[len(_SPEC_PREFIX):].strip()
    return record
