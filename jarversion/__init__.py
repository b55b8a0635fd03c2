"""
jarversion: query version metadata and an integrity hash from Java archives.

Features:

- Locates ``META-INF/MANIFEST.MF`` inside a JAR (case-insensitive) and reads
  ``Implementation-Version`` and ``Specification-Version``.
- Optional whole-file MD5 content hash for build-provenance records.
- Text, JSON, JSON-file and text-file output modes.

The CLI lives in jarversion.cli (run_cli takes an argv list and an output
stream, main maps failures to a non-zero exit status).
"""

__version__ = "1.0.0"

__all__ = [
    "constants",
    "manifest",
    "reader",
    "hashutil",
    "render",
    "cli",
]
