# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Exceptions raised while resolving paths and applying patches."""


class PatchError(Exception):
    """Base class of all errors raised by the patch engine."""


class PathNotFoundError(PatchError):
    """A path that is required to exist does not resolve."""


class InvalidPathError(PatchError):
    """A path is malformed or illegal for the operation using it."""


class TypeMismatchError(PatchError):
    """An operation expected an object or array and found something else."""


class TestFailedError(PatchError, AssertionError):
    """The value found by a test operation differs from the expected one."""

    # Keep pytest from collecting this class
    __test__ = False


class PatchApplicationError(PatchError):
    """Applying a patch failed at operation number `index`.

    The error describing why is available as `reason`.
    """

    def __init__(self, index, reason):
        self.index = index
        self.reason = reason
        super(PatchApplicationError, self).__init__(
            "patch operation {} failed: {}".format(index, reason))
