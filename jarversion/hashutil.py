from __future__ import annotations

from Cryptodome.Hash import MD5

from .constants import HASH_CHUNK_SIZE
from .errors import HashComputeError


def md5_file(path: str, chunk_size: int = HASH_CHUNK_SIZE) -> str:
    """Return the lowercase hex MD5 of the raw bytes of ``path``.

    The file is opened here as a plain byte stream, independently of any
    JarReader holding the same path.
    """
    try:
        fh = open(path, "rb")
    except OSError as exc:
        raise HashComputeError(f"failed to open JAR file for hashing: {exc}") from exc
    h = MD5.new()
    with fh:
        try:
            while True:
                buf = fh.read(chunk_size)
                if not buf:
                    break
                h.update(buf)
        except OSError as exc:
            raise HashComputeError(f"failed to compute MD5 hash: {exc}") from exc
    return h.hexdigest()
