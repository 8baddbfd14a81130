# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from jsonpointer import escape

import jsondime.log
from ..pointer import Path
from ..utils import deep_equal, node_kind

from .config import DiffConfig
from .factorize import factorize_diff
from .lcs import lcs_indices
from .operations import diff_add, diff_remove, diff_replace, to_patch_operation

__all__ = ["diff", "diff_operations"]


def diff_operations(a, b, path=None, config=None):
    """Compute the internal diff operations transforming a into b.

    Same as diff, but the result keeps the displaced old values
    for inspection.
    """
    if config is None:
        config = DiffConfig()
    if path is None:
        path = Path()

    di = []
    diff_values(a, b, path, str(path), config, di)
    if di and config.factorize:
        di = factorize_diff(a, b, di, config, path)
    return di


def diff(a, b, path=None, config=None):
    """Compute the patch transforming json-like a into b.

    The result is a list of PatchOperations which, applied to a
    with patch(), reproduces b. It is empty iff a and b are equal.
    """
    di = diff_operations(a, b, path=path, config=config)
    jsondime.log.debug("Computed diff with %d operations", len(di))
    return [to_patch_operation(d) for d in di]


def diff_values(a, b, path, pattern, config, di):
    """Append diff operations transforming a into b at path to di.

    pattern is path in the form used for atomic_paths lookups,
    with array indices replaced by '*'.
    """
    akind = node_kind(a)
    bkind = node_kind(b)
    if akind != bkind or config.is_atomic(a, pattern):
        if not deep_equal(a, b):
            di.append(diff_replace(path, a, b))
    elif akind == "object":
        diff_dicts(a, b, path, pattern, config, di)
    elif akind == "array":
        diff_lists(a, b, path, pattern, config, di)
    elif not deep_equal(a, b):
        di.append(diff_replace(path, a, b))


def _check_key(key):
    if not isinstance(key, str):
        raise TypeError("Object keys must be strings, got {!r}".format(key))


def diff_dicts(a, b, path, pattern, config, di):
    """Compute diff of two dicts.

    Fields only in a are removed, in the iteration order of a.
    Then fields of b are visited in their iteration order: fields
    missing from a are added, fields present in both are recursed into.
    """
    for key, avalue in a.items():
        _check_key(key)
        if key not in b:
            di.append(diff_remove(path.append(key), avalue))

    for key, bvalue in b.items():
        _check_key(key)
        subpath = path.append(key)
        if key not in a:
            di.append(diff_add(subpath, bvalue))
        else:
            diff_values(a[key], bvalue, subpath, "/".join((pattern, escape(key))), config, di)


def diff_lists(a, b, path, pattern, config, di):
    """Compute diff of two lists.

    Elements are aligned along a longest common subsequence.
    Between two aligned elements, the unaligned elements of a and b
    are paired up by position and the pairs recursed into, leftovers
    are removed from a or added from b.

    All removals come first, with descending indices. The remaining
    operations then follow b in ascending index order, so each index
    refers to its final position in b.
    """
    A_indices, B_indices = lcs_indices(a, b)

    removed = []
    added = set()
    paired = {}
    x, y = 0, 0
    for i, j in list(zip(A_indices, B_indices)) + [(len(a), len(b))]:
        n = min(i - x, j - y)
        for k in range(n):
            paired[y + k] = x + k
        removed.extend(range(x + n, i))
        added.update(range(y + n, j))
        x, y = i + 1, j + 1

    for i in reversed(removed):
        di.append(diff_remove(path.append(i), a[i]))

    subpattern = "/".join((pattern, "*"))
    for j, bvalue in enumerate(b):
        if j in added:
            di.append(diff_add(path.append(j), bvalue))
        elif j in paired:
            diff_values(a[paired[j]], bvalue, path.append(j), subpattern, config, di)
