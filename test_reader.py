from __future__ import annotations

import hashlib
import io
import os
import tempfile
import unittest
import zipfile
from pathlib import Path

from jarversion.cli import run_cli
from jarversion.errors import ArchiveOpenError, EntryReadError, HashComputeError
from jarversion.hashutil import md5_file
from jarversion.reader import JarReader


def _write_zip(path: Path, entries):
    with zipfile.ZipFile(path, "w", compression=zipfile.ZIP_DEFLATED) as zf:
        for name, data in entries:
            zf.writestr(name, data)


class JarReaderTests(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.root = Path(self._tmp.name)

    def test_finds_manifest_case_insensitively(self):
        for name in ("META-INF/MANIFEST.MF", "meta-inf/manifest.mf", "Meta-Inf/Manifest.MF"):
            jar = self.root / "app.jar"
            _write_zip(jar, [("a/B.class", b"x"), (name, b"Implementation-Version: 1\n")])
            with JarReader(str(jar)) as r:
                info = r.find_manifest()
                self.assertIsNotNone(info)
                self.assertEqual(info.filename, name)
                self.assertEqual(r.read_entry(info), b"Implementation-Version: 1\n")

    def test_first_match_wins(self):
        jar = self.root / "dup.jar"
        with zipfile.ZipFile(jar, "w") as zf:
            zf.writestr("meta-inf/manifest.mf", b"first")
            zf.writestr("META-INF/MANIFEST.MF", b"second")
        with JarReader(str(jar)) as r:
            self.assertEqual(r.read_entry(r.find_manifest()), b"first")

    def test_corrupted_manifest_payload(self):
        jar = self.root / "stored.jar"
        content = b"Implementation-Version: 1.2.3\n"
        with zipfile.ZipFile(jar, "w", compression=zipfile.ZIP_STORED) as zf:
            zf.writestr("META-INF/MANIFEST.MF", content)
        raw = bytearray(jar.read_bytes())
        off = raw.index(content) + 5
        raw[off] ^= 0xFF
        jar.write_bytes(bytes(raw))

        with JarReader(str(jar)) as r:
            info = r.find_manifest()
            self.assertIsNotNone(info)
            with self.assertRaises(EntryReadError):
                r.read_entry(info)
        with self.assertRaises(EntryReadError):
            run_cli([str(jar)], io.StringIO())

    def test_only_simple_case_folding(self):
        jar = self.root / "ligature.jar"
        _write_zip(jar, [("META-INF/MANIFE\ufb06.MF", b"Implementation-Version: 1\n")])
        with JarReader(str(jar)) as r:
            self.assertIsNone(r.find_manifest())

    def test_missing_manifest(self):
        jar = self.root / "plain.jar"
        _write_zip(jar, [("META-INF/OTHER.MF", b"x"), ("MANIFEST.MF", b"y")])
        with JarReader(str(jar)) as r:
            self.assertIsNone(r.find_manifest())

    def test_handle_closed_after_with(self):
        jar = self.root / "c.jar"
        _write_zip(jar, [("META-INF/MANIFEST.MF", b"")])
        r = JarReader(str(jar))
        with r:
            self.assertIsNotNone(r.zf)
        self.assertIsNone(r.zf)
        with self.assertRaises(RuntimeError):
            r.list()

    def test_open_errors(self):
        with self.assertRaises(ArchiveOpenError):
            JarReader(str(self.root / "missing.jar")).open()
        bogus = self.root / "bogus.jar"
        bogus.write_bytes(b"not a zip file at all")
        with self.assertRaises(ArchiveOpenError):
            with JarReader(str(bogus)):
                pass


class HashTests(unittest.TestCase):
    def test_known_digests(self):
        with tempfile.TemporaryDirectory() as tmp:
            p = Path(tmp) / "hello.txt"
            p.write_bytes(b"hello world\n")
            self.assertEqual(md5_file(str(p)), "6f5902ac237024bdd0c176cb93063dc4")
            p.write_bytes(b"")
            self.assertEqual(md5_file(str(p)), "d41d8cd98f00b204e9800998ecf8427e")

    def test_chunked_matches_hashlib(self):
        with tempfile.TemporaryDirectory() as tmp:
            p = Path(tmp) / "blob.bin"
            data = os.urandom(200_003)
            p.write_bytes(data)
            self.assertEqual(md5_file(str(p), chunk_size=4096), hashlib.md5(data).hexdigest())

    def test_missing_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(HashComputeError):
                md5_file(str(Path(tmp) / "nope.jar"))


if __name__ == "__main__":
    unittest.main()
