"""Deep-merge rules shared by every aggregation step.

One rule set, used everywhere a fragment is merged:

- mappings recurse key by key
- scalars and lists in a later source replace the earlier value wholesale
- the result is a fresh structure; inputs are never mutated or aliased

Lists that must accumulate (``servers``, ``tags``, ``security``) are
joined explicitly with :func:`concat`, never by :func:`deep_merge`.
"""

import copy
from collections.abc import Iterable, Mapping
from typing import Any


def deep_merge(target: Mapping[str, Any] | None, *sources: Mapping[str, Any] | None) -> dict[str, Any]:
    """Merge *sources* over *target*, later sources winning.

    ``None`` sources are skipped, so optional fragments can be passed
    straight through::

        deep_merge({"info": {"title": "A"}}, {"info": {"version": "2"}}, None)
        # {"info": {"title": "A", "version": "2"}}
    """
    result: dict[str, Any] = copy.deepcopy(dict(target)) if target else {}
    for source in sources:
        if not source:
            continue
        for key, value in source.items():
            current = result.get(key)
            if isinstance(current, dict) and isinstance(value, Mapping):
                result[key] = deep_merge(current, value)
            else:
                result[key] = copy.deepcopy(value)
    return result


def concat(*sequences: Iterable[Any] | None) -> list[Any]:
    """Join optional sequences in order. No deduplication, values are copied."""
    result: list[Any] = []
    for seq in sequences:
        if seq:
            result.extend(copy.deepcopy(list(seq)))
    return result


def merge_paths(target: dict[str, Any], paths: Mapping[str, Any]) -> None:
    """Merge *paths* into *target* in place, key by key.

    A path already present is deep-merged so two contributors can each
    add methods to the same path item.
    """
    for path, item in paths.items():
        if isinstance(target.get(path), dict) and isinstance(item, Mapping):
            target[path] = deep_merge(target[path], item)
        else:
            target[path] = copy.deepcopy(item)
