import os
from cidrhosts.core.config import settings

CACHE_DIR = settings.CACHE_DIR

def cache_filename(identifier: str) -> str:
    """Cache file name for an identifier, e.g. 1.2.3.0/24 -> cache_1.2.3.0_24.html"""
    return "cache_%s.html" % identifier.replace("/", "_")

def cache_path(identifier: str) -> str:
    return os.path.join(CACHE_DIR, cache_filename(identifier))

def exists(identifier: str) -> bool:
    """Check whether a cached page is present for the identifier"""
    return os.path.exists(cache_path(identifier))

def write(identifier: str, body: bytes) -> str:
    """Store raw page bytes for the identifier and return the file path"""
    path = cache_path(identifier)
    if CACHE_DIR:
        os.makedirs(CACHE_DIR, exist_ok=True)
    with open(path, "wb") as f:
        f.write(body)
    return path

def read(identifier: str) -> bytes:
    """Read cached page bytes; raises OSError when the entry is missing"""
    with open(cache_path(identifier), "rb") as f:
        return f.read()

def delete(identifier: str) -> str:
    """
    Remove the cache entry for the identifier.
    Raises OSError if the file cannot be removed.
    """
    path = cache_path(identifier)
    os.remove(path)
    return path
