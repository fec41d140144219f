"""
Naming helpers for plugin, shareable config and formatter packages.

Short names given by users (``foo``, ``@scope``, ``@scope/foo``) are mapped to
the full package names (``eslint-plugin-foo``, ``@scope/eslint-plugin``,
``@scope/eslint-plugin-foo``) and back, and namespaces can be split off a
term for display and lookup.

Every function is pure and accepts the prefix either as a plain string or as
a :class:`~lintnaming.categories.PackageCategory` member.
"""
import re
from functools import lru_cache
from typing import Tuple, Union

from lintnaming.categories import PackageCategory
from lintnaming.path_util import to_posix_path

Prefix = Union[str, PackageCategory]

NAMESPACE_REGEX = re.compile(r"^@.*/", re.IGNORECASE)
SCOPED_NAME_REGEX = re.compile(r"^@([^/]+)/(.*)\Z")


def _prefix_value(prefix: Prefix) -> str:
    if isinstance(prefix, PackageCategory):
        return prefix.value
    return prefix


@lru_cache(maxsize=64)
def _scoped_patterns(prefix: str) -> Tuple[re.Pattern, re.Pattern]:
    """Compile the scoped shortcut and scoped name patterns for a prefix."""
    escaped = re.escape(prefix)
    shortcut = re.compile(rf"^(@[^/]+)(?:/(?:{escaped})?)?\Z")
    already_prefixed = re.compile(rf"^{escaped}(-|\Z)")
    return shortcut, already_prefixed


@lru_cache(maxsize=64)
def _shorthand_patterns(prefix: str) -> Tuple[re.Pattern, re.Pattern]:
    escaped = re.escape(prefix)
    bare_scope = re.compile(rf"^(@[^/]+)/{escaped}\Z")
    scoped_name = re.compile(rf"^(@[^/]+)/{escaped}-(.+)\Z")
    return bare_scope, scoped_name


def normalize_package_name(name: str, prefix: Prefix) -> str:
    """Bring a package name to its full form for the given prefix.

    Args:
        name: Name as supplied by the user, e.g. ``foo``, ``@scope`` or
            ``@scope/foo``. Windows separators are accepted.
        prefix: Category prefix such as ``eslint-plugin``.

    Returns:
        ``<prefix>-foo`` for unscoped names, ``@scope/<prefix>`` for scope
        shortcuts and ``@scope/<prefix>-foo`` for scoped names. Names already
        in full form are returned unchanged.
    """
    prefix = _prefix_value(prefix)

    # Names typed on Windows may use backslashes instead of slashes
    if "\\" in name:
        name = to_posix_path(name)

    if name.startswith("@"):
        shortcut, already_prefixed = _scoped_patterns(prefix)

        if shortcut.match(name):
            return shortcut.sub(lambda m: f"{m.group(1)}/{prefix}", name, count=1)

        segments = name.split("/")
        if len(segments) > 1 and not already_prefixed.match(segments[1]):
            # insert the prefix after the scope unless it is @scope/<prefix>[-...]
            return SCOPED_NAME_REGEX.sub(
                lambda m: f"@{m.group(1)}/{prefix}-{m.group(2)}", name, count=1
            )
        return name

    if not name.startswith(f"{prefix}-"):
        return f"{prefix}-{name}"
    return name


def get_shorthand_name(full_name: str, prefix: Prefix) -> str:
    """Return the short form of a full package name.

    ``eslint-plugin-foo`` becomes ``foo``, ``@scope/eslint-plugin`` becomes
    ``@scope`` and ``@scope/eslint-plugin-foo`` becomes ``@scope/foo``. Names
    that do not carry the prefix are returned unchanged.
    """
    prefix = _prefix_value(prefix)

    if full_name.startswith("@"):
        bare_scope, scoped_name = _shorthand_patterns(prefix)

        match = bare_scope.match(full_name)
        if match:
            return match.group(1)

        match = scoped_name.match(full_name)
        if match:
            return f"{match.group(1)}/{match.group(2)}"
    elif full_name.startswith(f"{prefix}-"):
        return full_name[len(prefix) + 1:]

    return full_name


def remove_prefix_from_term(prefix: Prefix, term: str) -> str:
    """Remove the prefix from a term if it starts with it."""
    prefix = _prefix_value(prefix)
    return term[len(prefix):] if term.startswith(prefix) else term


def add_prefix_to_term(prefix: Prefix, term: str) -> str:
    """Add the prefix to a term unless it already starts with it."""
    prefix = _prefix_value(prefix)
    return term if term.startswith(prefix) else f"{prefix}{term}"


def get_namespace_from_term(term: str) -> str:
    """Return the ``@scope/`` namespace of a term, or an empty string."""
    match = NAMESPACE_REGEX.match(term)
    return match.group(0) if match else ""


def remove_namespace_from_term(term: str) -> str:
    """Return the term without its ``@scope/`` namespace."""
    return NAMESPACE_REGEX.sub("", term, count=1)
