"""Deep merge of JSON-like documents used to reconcile ``package.json`` files.

``deep_merge`` folds an incoming document into an existing one in place:

- list + list   -> concatenation with duplicates removed (first-seen order)
- dict + dict   -> recursive merge
- anything else -> the incoming value wins

Example::

    user1 = {"name": "jack", "age": 22, "links": {"a": 1, "b": 2}}
    user2 = {"name": "tony", "links": {"a": 3, "c": 4}}

    deep_merge(user1, user2)
    # {"name": "tony", "age": 22, "links": {"a": 3, "b": 2, "c": 4}}

Inputs must be acyclic.
"""

from __future__ import annotations

from typing import Any


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

DEPENDENCY_FIELDS: tuple[str, ...] = (
    "dependencies",
    "devDependencies",
    "peerDependencies",
    "optionalDependencies",
)


# ---------------------------------------------------------------------------
# Merge
# ---------------------------------------------------------------------------


def deep_merge(target: dict[str, Any], obj: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge *obj* into *target* and return *target*.

    Keys present only in *target* are never removed.  On conflict the value
    from *obj* wins, except when both sides are lists (deduplicated union)
    or both are dicts (merged recursively).

    Values taken from *obj* are stored by reference, not copied: a later
    merge into *target* can mutate containers that still belong to *obj*.
    Do not reuse an incoming document after merging it.
    """
    for key, new_val in obj.items():
        old_val = target.get(key)

        if isinstance(old_val, list) and isinstance(new_val, list):
            target[key] = merge_array_with_dedupe(old_val, new_val)
        elif isinstance(old_val, dict) and isinstance(new_val, dict):
            target[key] = deep_merge(old_val, new_val)
        else:
            target[key] = new_val

    return target


def merge_array_with_dedupe(a: list[Any], b: list[Any]) -> list[Any]:
    """Concatenate *a* and *b*, dropping values already seen.

    Values are compared structurally (see ``json_equal``), so two equal
    objects inside the arrays collapse into one.
    """
    merged: list[Any] = []
    for item in [*a, *b]:
        if not any(json_equal(item, seen) for seen in merged):
            merged.append(item)
    return merged


def json_equal(a: Any, b: Any) -> bool:
    """Compare two JSON values by structure and JSON type.

    ``True`` and ``1`` are different JSON values even though Python treats
    them as equal; ``1`` and ``1.0`` are the same JSON number.
    """
    if isinstance(a, bool) or isinstance(b, bool):
        return isinstance(a, bool) and isinstance(b, bool) and a is b
    if isinstance(a, (int, float)) and isinstance(b, (int, float)):
        return a == b
    if isinstance(a, list) and isinstance(b, list):
        return len(a) == len(b) and all(json_equal(x, y) for x, y in zip(a, b))
    if isinstance(a, dict) and isinstance(b, dict):
        return a.keys() == b.keys() and all(json_equal(a[k], b[k]) for k in a)
    if type(a) is not type(b):
        return False
    return a == b


# ---------------------------------------------------------------------------
# Canonical ordering
# ---------------------------------------------------------------------------


def sort_dependencies(package_json: dict[str, Any]) -> dict[str, Any]:
    """Return a copy of *package_json* with dependency maps sorted by name.

    Only the fields in ``DEPENDENCY_FIELDS`` are reordered; every field keeps
    its position in the top-level mapping.
    """
    sorted_fields: dict[str, dict[str, Any]] = {}

    for dep_type in DEPENDENCY_FIELDS:
        deps = package_json.get(dep_type)
        if deps and isinstance(deps, dict):
            sorted_fields[dep_type] = {name: deps[name] for name in sorted(deps)}

    return {**package_json, **sorted_fields}
