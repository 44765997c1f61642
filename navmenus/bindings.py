"""
Placeholder substitution for menu item properties.

Strings may embed ``{ name }`` placeholders that are filled from the bindings
map set on the builder::

    resolver = BindingResolver({"name": "Ann", "user": request.user})
    resolver.resolve("Hello {name}!")   # "Hello Ann!"
    resolver.resolve("{user.email}")    # request.user.email

Exact keys are substituted in place. A dotted placeholder walks the named
fields of the binding and the value it reaches replaces the *whole* host
string, so dotted placeholders are meant to be the entire property value.
Unknown placeholders are left as they are.
"""

import re
from collections.abc import Mapping

from .exceptions import BindingLookupError

PLACEHOLDER_RE = re.compile(r"\{\s*([^\s{}]+)\s*\}")

_MISSING = object()


def lookup_path(value, segments, placeholder=""):
    """Follow ``segments`` from ``value``, reading mapping keys or attributes."""
    if not segments:
        return value

    segment = segments[0]
    if isinstance(value, Mapping):
        found = value.get(segment, _MISSING)
    else:
        found = getattr(value, segment, _MISSING)

    if found is _MISSING:
        raise BindingLookupError(placeholder, segment)

    return lookup_path(found, segments[1:], placeholder)


class BindingResolver:
    """Expands placeholders against an immutable snapshot of the bindings."""

    def __init__(self, bindings=None):
        self.bindings = dict(bindings or {})

    def resolve(self, value):
        if isinstance(value, dict):
            return {key: self.resolve(v) for key, v in value.items()}
        if isinstance(value, (list, tuple)):
            return type(value)(self.resolve(v) for v in value)
        if isinstance(value, str):
            return self._resolve_string(value)
        return value

    def _resolve_string(self, value):
        for match in PLACEHOLDER_RE.finditer(value):
            placeholder, identifier = match.group(0), match.group(1)

            if identifier in self.bindings:
                value = value.replace(placeholder, str(self.bindings[identifier]), 1)
                continue

            head, _, rest = identifier.partition(".")
            if rest and head in self.bindings:
                return lookup_path(self.bindings[head], rest.split("."), placeholder)

        return value

    def resolve_item(self, item):
        """Fill ``item`` (a working copy) with its resolved properties."""
        resolved = {}
        for key, value in item.get_properties().items():
            result = self.resolve(value)
            resolved[key] = value if result is None else result
        return item.fill(resolved)


__all__ = [
    "BindingResolver",
    "PLACEHOLDER_RE",
    "lookup_path",
]
