"""
Documentation group descriptors and route selection.

An :class:`ApiGroupDescriptor` names a subset of the API surface.  A
route belongs to a group when its path template matches one of the
group's Ant‑style path patterns and its endpoint function is defined in
one of the group's packages.  Exclusion lists remove routes that would
otherwise match.

Path patterns follow the Ant conventions used by most documentation
tools:

* ``?`` matches exactly one character inside a path segment;
* ``*`` matches zero or more characters inside a path segment;
* ``**`` used as a whole segment matches zero or more segments.

``/**`` therefore matches every path, including ``/`` itself.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Callable, List, Optional, Pattern, Tuple


@dataclass(frozen=True)
class ApiGroupDescriptor:
    """Immutable description of one documentation group.

    Attributes:
        group_name: Unique name of the group, used in document URLs.
        path_match_patterns: Ant patterns a route path must match.  An
            empty sequence matches every path.
        package_scan_roots: Dotted module prefixes an endpoint must be
            defined under.  An empty sequence matches every module.
        display_name: Human readable label.  Defaults to ``group_name``.
        paths_to_exclude: Ant patterns removing routes from the group.
        packages_to_exclude: Module prefixes removing routes from the group.
    """

    group_name: str
    path_match_patterns: Tuple[str, ...] = ()
    package_scan_roots: Tuple[str, ...] = ()
    display_name: Optional[str] = None
    paths_to_exclude: Tuple[str, ...] = field(default=())
    packages_to_exclude: Tuple[str, ...] = field(default=())

    def __post_init__(self) -> None:
        # Accept lists or a single string from callers but store tuples so
        # the descriptor stays hashable and cannot be changed after
        # construction.
        for name in ("path_match_patterns", "package_scan_roots", "paths_to_exclude", "packages_to_exclude"):
            value = getattr(self, name)
            object.__setattr__(self, name, (value,) if isinstance(value, str) else tuple(value))

    @property
    def label(self) -> str:
        return self.display_name or self.group_name

    def matches_path(self, path: str) -> bool:
        """Return ``True`` if ``path`` is selected by the path filters."""
        if self.path_match_patterns and not any(ant_match(p, path) for p in self.path_match_patterns):
            return False
        return not any(ant_match(p, path) for p in self.paths_to_exclude)

    def matches_module(self, module: Optional[str]) -> bool:
        """Return ``True`` if ``module`` is selected by the package filters."""
        if self.package_scan_roots and not any(in_package(module, root) for root in self.package_scan_roots):
            return False
        return not any(in_package(module, root) for root in self.packages_to_exclude)

    def matches_endpoint(self, path: str, endpoint: Callable) -> bool:
        return self.matches_path(path) and self.matches_module(getattr(endpoint, "__module__", None))


@lru_cache(maxsize=256)
def compile_ant_pattern(pattern: str) -> Pattern[str]:
    """Translate an Ant path pattern into a compiled regular expression."""
    segments = [s for s in pattern.strip("/").split("/") if s]
    regex = ""
    for segment in segments:
        if segment == "**":
            regex += "(?:/.*)?"
            continue
        regex += "/"
        for char in segment:
            if char == "*":
                regex += "[^/]*"
            elif char == "?":
                regex += "[^/]"
            else:
                regex += re.escape(char)
    return re.compile("^" + regex + "/?$")


def ant_match(pattern: str, path: str) -> bool:
    """Match ``path`` against an Ant pattern.

    A trailing slash on ``path`` is ignored, so ``/api/v1/info/`` and
    ``/api/v1/info`` are treated alike.
    """
    if not path.startswith("/"):
        path = "/" + path
    return compile_ant_pattern(pattern).match(path) is not None


def in_package(module: Optional[str], root: str) -> bool:
    """Return ``True`` if ``module`` is ``root`` or one of its submodules."""
    if not module:
        return False
    return module == root or module.startswith(root + ".")


def describe(descriptor: ApiGroupDescriptor) -> List[str]:
    """Return short log‑friendly lines describing the group's filters."""
    lines = [f"paths={list(descriptor.path_match_patterns) or ['*']}"]
    lines.append(f"packages={list(descriptor.package_scan_roots) or ['*']}")
    if descriptor.paths_to_exclude:
        lines.append(f"excluded paths={list(descriptor.paths_to_exclude)}")
    if descriptor.packages_to_exclude:
        lines.append(f"excluded packages={list(descriptor.packages_to_exclude)}")
    return lines
