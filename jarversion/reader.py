from __future__ import annotations

import zipfile
import zlib
from typing import List, Optional

from .constants import MANIFEST_PATH
from .errors import ArchiveOpenError, EntryReadError


class JarReader:
    """Read-only view of a JAR as a container of named entries."""

    def __init__(self, path: str):
        self.path = path
        self.zf: Optional[zipfile.ZipFile] = None

    def __enter__(self):
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def open(self):
        if self.zf is not None:
            return
        try:
            self.zf = zipfile.ZipFile(self.path, "r")
        except (OSError, zipfile.BadZipFile, ValueError) as exc:
            raise ArchiveOpenError(f"failed to open JAR file: {exc}") from exc

    def close(self):
        if self.zf is not None:
            self.zf.close()
            self.zf = None

    def list(self) -> List[zipfile.ZipInfo]:
        if self.zf is None:
            raise RuntimeError("Archive not open")
        return self.zf.infolist()

    def find_entry(self, name: str) -> Optional[zipfile.ZipInfo]:
        """Return the first entry whose name matches ``name`` ignoring case.

        Entries are scanned in central-directory order and the scan stops at
        the first match, so duplicate names differing only in case resolve to
        whichever was stored first.
        """
        wanted = name.lower()
        for info in self.list():
            if info.filename.lower() == wanted:
                return info
        return None

    def find_manifest(self) -> Optional[zipfile.ZipInfo]:
        return self.find_entry(MANIFEST_PATH)

    def read_entry(self, info: zipfile.ZipInfo) -> bytes:
        if self.zf is None:
            raise RuntimeError("Archive not open")
        try:
            with self.zf.open(info, "r") as fh:
                return fh.read()
        except (OSError, zipfile.BadZipFile, zlib.error, RuntimeError, NotImplementedError, EOFError) as exc:
            raise EntryReadError(f"failed to read {info.filename}: {exc}") from exc
