"""Lexical extraction of HTTP method handlers from route source files.

This is a pattern scan over exported symbols, not a parse: a method counts
as implemented when the file exports a function or binding named after it.
"""

import re

HTTP_METHODS = ("get", "post", "put", "patch", "delete", "options", "head")

_METHOD_ALTERNATION = "|".join(m.upper() for m in HTTP_METHODS)

_EXPORT_PATTERN = re.compile(
    rf"export\s+(?:async\s+)?(?:function|const|let|var)\s+({_METHOD_ALTERNATION})\b",
    re.IGNORECASE,
)


def extract_http_methods(text: str) -> set[str]:
    """Return the lowercase HTTP methods exported by a route file."""
    return {match.group(1).lower() for match in _EXPORT_PATTERN.finditer(text)}


def sort_methods(methods) -> list[str]:
    """Order methods as get, post, put, patch, delete, options, head."""
    order = {m: i for i, m in enumerate(HTTP_METHODS)}
    return sorted(methods, key=lambda m: (order.get(m, len(order)), m))


def extract_method_implementation(text: str, method: str) -> str | None:
    """Extract the source of the exported handler for one HTTP method.

    Handles ``export [async] function METHOD(...) {...}`` and
    ``export const METHOD = [async] (...) => {...}``. The body is taken up to
    the first closing brace at the start of a line. Returns None when no
    handler is found.
    """
    name = re.escape(method.upper())

    function_pattern = re.compile(
        rf"export\s+(?:async\s+)?function\s+{name}\s*\(([\s\S]*?)\)\s*(?::\s*[^{{]*)?\s*{{([\s\S]*?)\n}}",
        re.IGNORECASE,
    )
    arrow_pattern = re.compile(
        rf"export\s+(?:const|let|var)\s+{name}\s*=\s*(?:async\s+)?\(([\s\S]*?)\)\s*(?::\s*[^=]*)?\s*=>\s*{{([\s\S]*?)\n}}",
        re.IGNORECASE,
    )

    for pattern in (function_pattern, arrow_pattern):
        match = pattern.search(text)
        if match and match.group(2):
            params = match.group(1).strip()
            return f"export async function {method.upper()}({params}) {{{match.group(2)}\n}}"

    return None
