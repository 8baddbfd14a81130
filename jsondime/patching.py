# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import copy
import logging

from .errors import (
    PatchError, PatchApplicationError, PathNotFoundError, InvalidPathError,
    TypeMismatchError, TestFailedError,
)
from .patch_format import PatchOp, from_dicts
from .pointer import resolve, array_index
from .utils import Missing, deep_equal, get_child, is_array, is_object, node_kind


__all__ = ["patch"]

_logger = logging.getLogger(__name__)


def _resolve_parent(doc, path):
    parent = resolve(doc, path.parent())
    if parent is Missing:
        raise PathNotFoundError("No container found at '{}'".format(path.parent()))
    return parent


def patch_add(doc, path, value):
    "Insert value at path, returning the (possibly new) document root."
    if path.is_root:
        return value
    parent = _resolve_parent(doc, path)
    token = path.last_token
    if is_object(parent):
        parent[str(token)] = value
    elif is_array(parent):
        index = array_index(token, len(parent), allow_append=True)
        if index > len(parent):
            raise PathNotFoundError(
                "Index {} is out of range for array of length {} at '{}'".format(
                    index, len(parent), path.parent()))
        parent.insert(index, value)
    else:
        raise TypeMismatchError(
            "Cannot add to {} at '{}', expecting object or array".format(
                node_kind(parent), path.parent()))
    return doc


def patch_remove(doc, path):
    "Remove the existing value at path, returning the document and the removed value."
    if path.is_root:
        raise InvalidPathError("Cannot remove the document root")
    parent = _resolve_parent(doc, path)
    token = path.last_token
    if is_object(parent):
        key = str(token)
        if key not in parent:
            raise PathNotFoundError("No field {!r} to remove at '{}'".format(key, path))
        return doc, parent.pop(key)
    elif is_array(parent):
        index = array_index(token, len(parent))
        if index >= len(parent):
            raise PathNotFoundError("No element to remove at '{}'".format(path))
        return doc, parent.pop(index)
    raise PathNotFoundError(
        "No value to remove at '{}', parent is {}".format(path, node_kind(parent)))


def patch_replace(doc, path, value):
    "Replace the existing value at path."
    if path.is_root:
        return value
    if resolve(doc, path) is Missing:
        raise PathNotFoundError("No value to replace at '{}'".format(path))
    parent = resolve(doc, path.parent())
    if is_object(parent):
        parent[str(path.last_token)] = value
    else:
        parent[array_index(path.last_token, len(parent))] = value
    return doc


def patch_move(doc, source, path):
    if resolve(doc, source) is Missing:
        raise PathNotFoundError("No value to move at '{}'".format(source))
    if path.is_descendant_of(source):
        raise InvalidPathError(
            "Cannot move '{}' into its own descendant '{}'".format(source, path))
    if str(path) == str(source):
        return doc
    doc, value = patch_remove(doc, source)
    return patch_add(doc, path, value)


def patch_copy(doc, source, path):
    value = resolve(doc, source)
    if value is Missing:
        raise PathNotFoundError("No value to copy at '{}'".format(source))
    return patch_add(doc, path, copy.deepcopy(value))


def patch_test(doc, path, value):
    actual = resolve(doc, path)
    if actual is Missing:
        raise TestFailedError("No value at '{}' to test against {!r}".format(path, value))
    if not deep_equal(actual, value):
        raise TestFailedError(
            "Value at '{}' is {!r}, expected {!r}".format(path, actual, value))
    return doc


def patch_omit(doc, path, optional=False):
    """Remove the value at path if it exists.

    The parent container has to exist unless optional is set.
    """
    if path.is_root:
        raise InvalidPathError("Cannot omit the document root")
    parent = resolve(doc, path.parent())
    if parent is Missing:
        if optional:
            return doc
        raise PathNotFoundError("No container found at '{}'".format(path.parent()))
    if get_child(parent, path.last_token) is Missing:
        return doc
    doc, _ = patch_remove(doc, path)
    return doc


def apply_operation(doc, operation):
    """Apply a single operation to doc, in place where possible.

    Returns the new document root, which differs from doc only
    when the operation targets the root.
    """
    op = operation.op
    path = operation.path
    if op == PatchOp.ADD:
        return patch_add(doc, path, copy.deepcopy(operation.value))
    elif op == PatchOp.REMOVE:
        doc, _ = patch_remove(doc, path)
        return doc
    elif op == PatchOp.REPLACE:
        return patch_replace(doc, path, copy.deepcopy(operation.value))
    elif op == PatchOp.MOVE:
        return patch_move(doc, operation.source, path)
    elif op == PatchOp.COPY:
        return patch_copy(doc, operation.source, path)
    elif op == PatchOp.TEST:
        return patch_test(doc, path, operation.value)
    elif op == PatchOp.OMIT:
        return patch_omit(doc, path)
    elif op == PatchOp.OMIT_OPTIONAL:
        return patch_omit(doc, path, optional=True)
    else:
        raise ValueError("Invalid op {}.".format(op))


def patch(obj, operations):
    """Produce a patched version of obj with the given list of operations.

    Operations can be PatchOperation objects or json patch records
    (dicts with "op", "path", "from" and "value" keys).

    The operations are applied in order to a private deep copy of
    obj, so obj itself is never modified. The first operation that
    fails aborts the whole patch with a PatchApplicationError
    carrying its index, and nothing is returned.
    """
    operations = from_dicts(operations)
    doc = copy.deepcopy(obj)
    for index, operation in enumerate(operations):
        _logger.debug("Applying patch operation %d: %r", index, operation)
        try:
            doc = apply_operation(doc, operation)
        except PatchError as e:
            _logger.debug("Patch operation %d failed: %s", index, e)
            raise PatchApplicationError(index, e) from e
    return doc
