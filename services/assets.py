"""Bundled static asset lookup.

A lookup maps a logical asset path such as ``index.html`` to either
``Found`` (with the asset bytes) or ``NotFound``.  Read failures are
reported through the result, never raised.
"""

from collections.abc import Callable, Mapping
from pathlib import Path

from models import AssetResult, Found, NotFound

AssetLookup = Callable[[str], AssetResult]

# Logical path of the bundled index document.
INDEX_ASSET = "index.html"

STATIC_DIR = Path(__file__).resolve().parent.parent / "static"


def directory_lookup(root: Path) -> AssetLookup:
    """Resolve logical paths to files under *root*.

    Missing files, directories, unreadable files, malformed paths and
    paths escaping *root* all resolve to ``NotFound``.
    """
    base = Path(root).resolve()

    def lookup(path: str) -> AssetResult:
        try:
            target = (base / path).resolve()
            if not target.is_relative_to(base):
                return NotFound(path=path)
            content = target.read_bytes()
        # ValueError: the OS cannot represent the path, e.g. embedded NUL
        except (OSError, ValueError):
            return NotFound(path=path)
        return Found(path=path, content=content)

    return lookup


def mapping_lookup(assets: Mapping[str, bytes]) -> AssetLookup:
    """Resolve logical paths against an in-memory mapping.

    The mapping is consulted on every call, not copied.
    """

    def lookup(path: str) -> AssetResult:
        content = assets.get(path)
        if content is None:
            return NotFound(path=path)
        return Found(path=path, content=content)

    return lookup


bundled_lookup: AssetLookup = directory_lookup(STATIC_DIR)
