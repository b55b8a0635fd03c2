from __future__ import annotations

import sys
import argparse

from typing import List, Optional, TextIO

from jarversion import __version__
from jarversion.constants import MSG_BANNER, MSG_MANIFEST_NOT_FOUND
from jarversion.errors import JarVersionError, ArgumentError, OutputWriteError
from jarversion.hashutil import md5_file
from jarversion.manifest import VersionRecord, decode_manifest, parse_manifest
from jarversion.reader import JarReader
from jarversion.render import render_json, render_lines


USAGE = """Usage: jarversion [options] <path-to-jar-file>

Options:
  --json             Output version info in JSON format
  --json-file <file> Write JSON output to specified file
  --text-file <file> Write version info to specified text file
  --md5              Output MD5 hash of the JAR file
  --version          Show tool version
  --help             Show this help message"""


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of printing and exiting."""

    def error(self, message: str):
        raise ArgumentError(message)


def build_parser() -> argparse.ArgumentParser:
    """Return a fresh parser for one invocation."""
    ap = _ArgumentParser(prog="jarversion", add_help=False, allow_abbrev=False)
    ap.add_argument("--json", action="store_true", help="Output version info in JSON format")
    ap.add_argument("--json-file", default="", help="Write JSON output to specified file")
    ap.add_argument("--text-file", default="", help="Write version info to specified text file")
    ap.add_argument("--md5", action="store_true", help="Output MD5 hash of the JAR file")
    ap.add_argument("--version", action="store_true", help="Show tool version")
    ap.add_argument("--help", action="store_true", help="Show this help message")
    # Only the first path is examined; one archive per invocation.
    ap.add_argument("paths", nargs="*", help="Path to the JAR file")
    return ap


def print_help(stdout: TextIO) -> None:
    print(USAGE, file=stdout)


def _write_file(path: str, text: str) -> None:
    try:
        with open(path, "w", encoding="utf-8", newline="") as fh:
            fh.write(text)
    except OSError as exc:
        raise OutputWriteError(f"failed to write {path}: {exc}") from exc


def cmd_md5(jar_path: str, stdout: TextIO) -> None:
    """Print the archive's MD5 without looking inside it."""
    print(f"MD5: {md5_file(jar_path)}", file=stdout)


def cmd_report(
    jar_path: str,
    stdout: TextIO,
    *,
    as_json: bool = False,
    json_file: str = "",
    text_file: str = "",
    with_md5: bool = False,
) -> Optional[VersionRecord]:
    """Read the manifest of ``jar_path`` and render its version fields.

    Args:
        jar_path: Archive to inspect.
        stdout: Output sink for results and confirmations.
        as_json: Render JSON to ``stdout``.
        json_file: When set, render JSON to this file instead.
        text_file: When set (and no JSON mode), write ``Key: value`` lines here.
        with_md5: Attach the MD5 of the whole archive file.

    Returns:
        The rendered record, or None when the archive has no manifest.

    Raises:
        ArchiveOpenError, EntryReadError, HashComputeError, OutputWriteError.
    """
    with JarReader(jar_path) as jar:
        info = jar.find_manifest()
        if info is None:
            print(MSG_MANIFEST_NOT_FOUND, file=stdout)
            return None
        data = jar.read_entry(info)

    record = parse_manifest(decode_manifest(data))
    if with_md5:
        record.md5 = md5_file(jar_path)

    if as_json or json_file:
        rendered = render_json(record)
        if json_file:
            _write_file(json_file, rendered)
            print(f"✅ JSON written to {json_file}", file=stdout)
        else:
            print(rendered, file=stdout)
    elif text_file:
        _write_file(text_file, "\n".join(render_lines(record)))
        print(f"✅ Version info written to {text_file}", file=stdout)
    else:
        for line in render_lines(record, md5_sep="  "):
            print(line, file=stdout)
    return record


def run_cli(argv: List[str], stdout: TextIO) -> None:
    """Run one jarversion invocation, writing all normal output to ``stdout``.

    Raises:
        JarVersionError: on an unknown flag or any archive, hash or output failure.
    """
    ap = build_parser()
    try:
        args = ap.parse_args(argv)
    except ArgumentError as exc:
        print(f"Error: {exc}", file=stdout)
        print_help(stdout)
        raise

    if args.help:
        print_help(stdout)
        return
    if args.version:
        print(f"jarversion CLI tool version: {__version__}", file=stdout)
        return
    if not args.paths:
        print(MSG_BANNER, file=stdout)
        print_help(stdout)
        return

    jar_path = args.paths[0]
    if args.md5 and not args.json and not args.json_file and not args.text_file:
        cmd_md5(jar_path, stdout)
        return

    cmd_report(
        jar_path,
        stdout,
        as_json=args.json,
        json_file=args.json_file,
        text_file=args.text_file,
        with_md5=args.md5,
    )


def main(argv: List[str] | None = None):
    if argv is None:
        argv = sys.argv[1:]
    try:
        run_cli(argv, sys.stdout)
    except (JarVersionError, OSError, UnicodeEncodeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)


if __name__ == "__main__":
    main()
