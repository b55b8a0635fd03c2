from __future__ import annotations

# Manifest entry location (compared case-insensitively)
MANIFEST_PATH = "META-INF/MANIFEST.MF"

# Recognized manifest keys (matched case-sensitively, as line prefixes)
KEY_IMPLEMENTATION_VERSION = "Implementation-Version"
KEY_SPECIFICATION_VERSION = "Specification-Version"
KEY_MD5 = "MD5"

# JSON field names
JSON_IMPLEMENTATION_VERSION = "implementation_version"
JSON_SPECIFICATION_VERSION = "specification_version"
JSON_MD5 = "md5"
JSON_INDENT = 2

# Read size when streaming the archive into the hash
HASH_CHUNK_SIZE = 64 * 1024

MSG_BANNER = "jarversion - Jar version CLI to query the version information in the MANIFEST.MF file."
MSG_MANIFEST_NOT_FOUND = "MANIFEST.MF not found in JAR file."
