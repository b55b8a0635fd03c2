from __future__ import annotations

import argparse
import sys
import zipfile
from typing import Optional

from jarversion.constants import MANIFEST_PATH


def build_manifest(impl: Optional[str], spec: Optional[str]) -> str:
    lines = ["Manifest-Version: 1.0", "Created-By: jarversion make_jar"]
    if impl:
        lines.append(f"Implementation-Version: {impl}")
    if spec:
        lines.append(f"Specification-Version: {spec}")
    # Manifests use CRLF line endings and end with a blank line.
    return "\r\n".join(lines) + "\r\n\r\n"


def write_jar(path: str, manifest: Optional[str], *, entry_name: str = MANIFEST_PATH) -> None:
    with zipfile.ZipFile(path, "w", compression=zipfile.ZIP_DEFLATED) as zf:
        if manifest is not None:
            zf.writestr(entry_name, manifest)
        zf.writestr("com/example/Main.class", b"\xca\xfe\xba\xbe\x00\x00\x00\x34")


def main(argv=None):
    ap = argparse.ArgumentParser(prog="make_jar", description="Write a sample JAR for trying out jarversion")
    ap.add_argument("output", help="Output .jar path")
    ap.add_argument("--impl", help="Implementation-Version value")
    ap.add_argument("--spec", help="Specification-Version value")
    ap.add_argument("--no-manifest", action="store_true", help="Omit META-INF/MANIFEST.MF")
    ap.add_argument("--lowercase", action="store_true", help="Store the manifest as meta-inf/manifest.mf")
    args = ap.parse_args(argv)

    manifest = None if args.no_manifest else build_manifest(args.impl, args.spec)
    entry_name = MANIFEST_PATH.lower() if args.lowercase else MANIFEST_PATH
    try:
        write_jar(args.output, manifest, entry_name=entry_name)
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)
    print(f"Wrote {args.output}")


if __name__ == "__main__":
    main()
