# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import io
import json
import os
from collections import namedtuple

from jsonschema import Draft4Validator

from .log import PatchFormatError
from .pointer import Path
from .utils import Missing


__all__ = [
    "Missing", "PatchOp", "PatchOperation",
    "op_add", "op_remove", "op_replace", "op_move", "op_copy",
    "op_test", "op_omit", "op_omit_optional",
    "to_dicts", "from_dict", "from_dicts", "validate_patch", "is_valid_patch",
]


class PatchOp:
    "Collection of valid values for the op field in patch operations."
    ADD = "add"
    REMOVE = "remove"
    REPLACE = "replace"
    MOVE = "move"
    COPY = "copy"
    TEST = "test"
    OMIT = "omit"
    OMIT_OPTIONAL = "omitOptional"

    ALL = (ADD, REMOVE, REPLACE, MOVE, COPY, TEST, OMIT, OMIT_OPTIONAL)

    # Operations carrying a "from" path
    WITH_SOURCE = (MOVE, COPY)

    # Operations carrying a value
    WITH_VALUE = (ADD, REPLACE, TEST)


_PatchOperationBase = namedtuple("PatchOperation", ["op", "path", "source", "value"])


class PatchOperation(_PatchOperationBase):
    """A single, immutable patch instruction.

    Fields the op does not use hold the Missing sentinel,
    which leaves None free to mean json null.
    """
    __slots__ = ()

    def __new__(cls, op, path, source=Missing, value=Missing):
        if op not in PatchOp.ALL:
            raise PatchFormatError("Unknown patch op {!r}.".format(op))
        path = Path.parse(path)
        if op in PatchOp.WITH_SOURCE:
            if source is Missing:
                raise PatchFormatError("Patch op {!r} needs a from path.".format(op))
            source = Path.parse(source)
        elif source is not Missing:
            raise PatchFormatError("Patch op {!r} takes no from path.".format(op))
        if op in PatchOp.WITH_VALUE:
            if value is Missing:
                raise PatchFormatError("Patch op {!r} needs a value.".format(op))
        elif value is not Missing:
            raise PatchFormatError("Patch op {!r} takes no value.".format(op))
        return super(PatchOperation, cls).__new__(cls, op, path, source, value)

    def __repr__(self):
        args = ["op={!r}".format(self.op), "path={!r}".format(str(self.path))]
        if self.source is not Missing:
            args.append("source={!r}".format(str(self.source)))
        if self.value is not Missing:
            args.append("value={!r}".format(self.value))
        return "PatchOperation({})".format(", ".join(args))

    def to_dict(self):
        "Return the json patch record for this operation."
        d = {"op": self.op, "path": str(self.path)}
        if self.source is not Missing:
            d["from"] = str(self.source)
        if self.value is not Missing:
            d["value"] = self.value
        return d


def op_add(path, value):
    "Create an operation adding value at path."
    return PatchOperation(PatchOp.ADD, path, value=value)

def op_remove(path):
    "Create an operation removing the existing value at path."
    return PatchOperation(PatchOp.REMOVE, path)

def op_replace(path, value):
    "Create an operation replacing the existing value at path."
    return PatchOperation(PatchOp.REPLACE, path, value=value)

def op_move(source, path):
    "Create an operation moving the value at source to path."
    return PatchOperation(PatchOp.MOVE, path, source=source)

def op_copy(source, path):
    "Create an operation copying the value at source to path."
    return PatchOperation(PatchOp.COPY, path, source=source)

def op_test(path, value):
    "Create an operation checking that the value at path equals value."
    return PatchOperation(PatchOp.TEST, path, value=value)

def op_omit(path):
    "Create an operation removing the value at path if there is one."
    return PatchOperation(PatchOp.OMIT, path)

def op_omit_optional(path):
    "Create an omit operation which also tolerates a missing parent."
    return PatchOperation(PatchOp.OMIT_OPTIONAL, path)


_validator = None

def _get_validator():
    global _validator
    if _validator is None:
        schema_path = os.path.join(os.path.dirname(__file__), "patch_format.schema.json")
        with io.open(schema_path, encoding="utf-8") as f:
            schema = json.load(f)
        Draft4Validator.check_schema(schema)
        _validator = Draft4Validator(schema)
    return _validator


def validate_patch(records):
    """Check whether a list of json patch records is well formed.

    Raises a PatchFormatError if not well formed.
    """
    errors = sorted(_get_validator().iter_errors(records), key=lambda e: list(e.path))
    if errors:
        e = errors[0]
        where = "/".join(str(p) for p in e.path)
        raise PatchFormatError("Invalid patch at '/{}': {}".format(where, e.message))


def is_valid_patch(records):
    """Checks whether a list of json patch records is well formed.

    Returns a boolean indicating the well-formedness of the patch.
    """
    try:
        validate_patch(records)
    except PatchFormatError:
        return False
    return True


def _record_to_operation(record):
    op = record["op"]
    source = Path.parse(record["from"]) if op in PatchOp.WITH_SOURCE else Missing
    value = record["value"] if op in PatchOp.WITH_VALUE else Missing
    return PatchOperation(op, Path.parse(record["path"]), source, value)


def from_dict(record):
    "Convert a single json patch record to a PatchOperation."
    if isinstance(record, PatchOperation):
        return record
    validate_patch([record])
    return _record_to_operation(record)


def from_dicts(records):
    """Convert a list of json patch records to PatchOperations.

    PatchOperations in the list are passed through unchanged, records
    are validated together so errors name their position in the list.
    """
    records = list(records)
    if not all(isinstance(r, PatchOperation) for r in records):
        validate_patch([r.to_dict() if isinstance(r, PatchOperation) else r
                        for r in records])
    return [r if isinstance(r, PatchOperation) else _record_to_operation(r)
            for r in records]


def to_dicts(operations):
    "Convert PatchOperations to a list of json patch records."
    return [op.to_dict() for op in operations]
