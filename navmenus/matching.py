"""
Deciding which menu entries belong to the current page.

Menu items and the ``active_path`` tag both describe "their" pages as path
patterns. A pattern ending in a slash claims the whole subtree below it; one
without a trailing slash claims itself and its children but not siblings that
merely share a prefix. Patterns may be joined with commas, and an ``r/``
prefix switches to a regular expression searched in the path.
"""

import re


def path_matches(path, base):
    """Return True when ``path`` matches ``base`` (see module docstring)."""
    path = path or ""

    # Regex mode: base starts with "r/"
    if isinstance(base, str) and base.startswith("r/"):
        try:
            return re.search(base[2:], path) is not None
        except re.error:
            # If the regex is invalid, treat as no match
            return False

    for part in (p.strip() for p in str(base).split(",")):
        if not part:
            continue

        if part.endswith("/"):
            if path.startswith(part):
                return True
        elif path == part or path.startswith(part + "/"):
            return True

    return False


def normalize(url):
    """Return ``url`` with a leading slash, the form request paths use."""
    if not url or url.startswith(("/", "#")) or "://" in url:
        return url
    return "/" + url
