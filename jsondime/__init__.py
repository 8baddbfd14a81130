# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ._version import __version__

from .diffing import diff, DiffConfig
from .errors import (
    PatchError, PathNotFoundError, InvalidPathError, TypeMismatchError,
    TestFailedError, PatchApplicationError,
)
from .log import PatchFormatError
from .patch_format import PatchOp, PatchOperation, from_dicts, to_dicts
from .patching import patch
from .pointer import APPEND, Path


__all__ = [
    "__version__",
    "diff", "DiffConfig",
    "patch",
    "Path", "APPEND",
    "PatchOp", "PatchOperation", "from_dicts", "to_dicts",
    "PatchError", "PathNotFoundError", "InvalidPathError", "TypeMismatchError",
    "TestFailedError", "PatchApplicationError", "PatchFormatError",
    ]
