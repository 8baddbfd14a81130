# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from collections import namedtuple

from ..patch_format import (
    Missing, op_add, op_copy, op_move, op_remove, op_replace,
)

__all__ = [
    "DiffType", "DiffOperation",
    "diff_add", "diff_copy", "diff_move", "diff_remove", "diff_replace",
    "to_patch_operation",
]


class DiffType:
    "Collection of valid values for the type field in diff operations."
    ADD = "add"
    COPY = "copy"
    MOVE = "move"
    REMOVE = "remove"
    REPLACE = "replace"


# old_value is the value displaced by the operation, if any
DiffOperation = namedtuple("DiffOperation", ["type", "source", "old_value", "path", "value"])


def diff_add(path, value):
    return DiffOperation(DiffType.ADD, Missing, Missing, path, value)

def diff_copy(source, path, value):
    return DiffOperation(DiffType.COPY, source, Missing, path, value)

def diff_move(source, old_value, path, value):
    return DiffOperation(DiffType.MOVE, source, old_value, path, value)

def diff_remove(path, old_value):
    return DiffOperation(DiffType.REMOVE, Missing, old_value, path, Missing)

def diff_replace(path, old_value, value):
    return DiffOperation(DiffType.REPLACE, Missing, old_value, path, value)


def to_patch_operation(d):
    "Convert a diff operation to the patch operation performing it."
    if d.type == DiffType.ADD:
        return op_add(d.path, d.value)
    elif d.type == DiffType.COPY:
        return op_copy(d.source, d.path)
    elif d.type == DiffType.MOVE:
        return op_move(d.source, d.path)
    elif d.type == DiffType.REMOVE:
        return op_remove(d.path)
    elif d.type == DiffType.REPLACE:
        return op_replace(d.path, d.value)
    else:
        raise ValueError("Invalid diff type {}.".format(d.type))
