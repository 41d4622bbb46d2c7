"""Route file discovery, path conversion and filtering.

Route files follow the Next.js app router convention: one ``route.<ext>``
file per URL path, with dynamic segments written as ``[name]`` folders.
"""

import re
from pathlib import Path, PurePosixPath

from api_doc_agent.errors import DiscoveryError

ROUTE_FILE_STEM = "route"

_DYNAMIC_SEGMENT = re.compile(r"\[([^\]]+)]")


def locate_route_files(root_dir: Path) -> list[str]:
    """Find all ``route.<ext>`` files under root_dir.

    Returns paths relative to root_dir with forward slashes, sorted.
    Raises DiscoveryError if root_dir cannot be read.
    """
    root = Path(root_dir)
    if not root.is_dir():
        raise DiscoveryError(f'Route directory "{root}" does not exist or is not a directory')

    try:
        matches = [
            p.relative_to(root).as_posix()
            for p in root.rglob(f"{ROUTE_FILE_STEM}.*")
            if p.is_file() and p.stem == ROUTE_FILE_STEM and p.suffix
        ]
    except OSError as e:
        raise DiscoveryError(f'Cannot read route directory "{root}": {e}') from e

    return sorted(matches)


def to_api_path(route_file: str) -> str:
    """Convert a route file path into an OpenAPI path template.

    ``users/[id]/route.ts`` -> ``/users/{id}``, ``route.ts`` -> ``/``.
    """
    directory = str(PurePosixPath(route_file.replace("\\", "/")).parent)
    directory = _DYNAMIC_SEGMENT.sub(r"{\1}", directory)
    api_path = "/" + directory.strip("/")
    if api_path == "/.":
        return "/"
    return api_path


def parse_route_patterns(value: str | None) -> list[str]:
    """Split a comma-separated ``--routes`` value into patterns."""
    if not value:
        return []
    return [p.strip() for p in value.split(",") if p.strip()]


def matches_route(api_path: str, pattern: str) -> bool:
    """Check an API path against one filter pattern.

    ``/users/*`` matches ``/users`` and everything below it; any other
    pattern is an exact match that tolerates one trailing slash.
    """
    if pattern.endswith("/*"):
        prefix = pattern[:-1]
        return api_path == prefix[:-1] or api_path.startswith(prefix)
    return _strip_slash(api_path) == _strip_slash(pattern)


def filter_route_files(route_files: list[str], patterns: list[str] | None = None) -> list[str]:
    """Keep the route files whose API path matches any of the patterns."""
    if not patterns:
        return list(route_files)
    return [
        f for f in route_files
        if any(matches_route(to_api_path(f), pattern) for pattern in patterns)
    ]


def _strip_slash(path: str) -> str:
    if len(path) > 1 and path.endswith("/"):
        return path[:-1]
    return path
