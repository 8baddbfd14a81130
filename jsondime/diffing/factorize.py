# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""
Rewriting of add operations into moves and copies.

Only paths made entirely of object fields take part: an array index
in either path would need the index arithmetic of the surrounding
operations to be redone.
"""

from ..utils import deep_equal, is_container, is_object
from .operations import DiffType, diff_copy, diff_move

__all__ = ["factorize_diff"]


def is_field_path(path):
    "Whether path only goes through object fields."
    return all(isinstance(token, str) for token in path)


def unchanged_values(a, b, path):
    """Yield (path, value) for object fields equal in a and b.

    Nested fields of unchanged objects are yielded too, in preorder.
    Arrays are not entered.
    """
    if not (is_object(a) and is_object(b)):
        return
    for key, avalue in a.items():
        if key not in b:
            continue
        subpath = path.append(key)
        if deep_equal(avalue, b[key]):
            yield subpath, avalue
            yield from unchanged_values(avalue, avalue, subpath)
        else:
            yield from unchanged_values(avalue, b[key], subpath)


def _copyable(value):
    # Copying scalars or empty containers saves nothing over adding them
    return is_container(value) and len(value) > 0


def _find_removal(diff, consumed, value):
    for r, e in enumerate(diff):
        if (r not in consumed and e.type == DiffType.REMOVE
                and is_field_path(e.path) and deep_equal(e.old_value, value)):
            return r
    return None


def factorize_diff(a, b, diff, config, path):
    """Replace add operations in diff by moves or copies where possible.

    An add of a value equal to one that diff removes becomes a move
    of the removed value, and the removal is dropped. Otherwise an add
    of a value equal to an unchanged value of a becomes a copy.
    """
    unchanged = None
    result = list(diff)
    consumed = set()
    for k, d in enumerate(result):
        if d.type != DiffType.ADD or not is_field_path(d.path):
            continue

        if config.detect_moves:
            r = _find_removal(result, consumed, d.value)
            if r is not None:
                consumed.add(r)
                e = result[r]
                result[k] = diff_move(e.path, e.old_value, d.path, d.value)
                continue

        if config.detect_copies and _copyable(d.value):
            if unchanged is None:
                unchanged = list(unchanged_values(a, b, path))
            for source, value in unchanged:
                if deep_equal(value, d.value):
                    result[k] = diff_copy(source, d.path, d.value)
                    break

    return [d for r, d in enumerate(result) if r not in consumed]
