# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Immutable hierarchical paths into json-like documents.

The textual form follows RFC 6901 (JSON Pointer), parsing and
escaping is delegated to the jsonpointer package.
"""

from jsonpointer import JsonPointer, JsonPointerException

from .errors import InvalidPathError, PathNotFoundError
from .utils import Missing, get_child, parse_index


__all__ = ["APPEND", "Path", "resolve", "array_index"]


# Reserved token meaning "one past the last element" of an array
APPEND = "-"


class Path(object):
    """An immutable sequence of tokens locating a value in a document.

    Tokens are field names (str) or array indices (int, or str
    in the textual form). The empty path is the document root.
    """

    __slots__ = ("_tokens",)

    def __init__(self, tokens=()):
        tokens = tuple(tokens)
        for token in tokens:
            if isinstance(token, bool) or not isinstance(token, (str, int)):
                raise TypeError("Path tokens must be str or int, got {!r}".format(token))
            if isinstance(token, int) and token < 0:
                raise InvalidPathError("Negative array index {} in path".format(token))
        object.__setattr__(self, "_tokens", tokens)

    @classmethod
    def parse(cls, text):
        "Parse a path on the form '/foo/0/bar'."
        if isinstance(text, Path):
            return text
        if not isinstance(text, str):
            raise InvalidPathError("Expected a pointer string, got {!r}".format(text))
        try:
            pointer = JsonPointer(text)
        except JsonPointerException as e:
            raise InvalidPathError("Invalid pointer {!r}: {}".format(text, e))
        return cls(pointer.parts)

    def __setattr__(self, name, value):
        raise AttributeError("Path objects are immutable")

    def __reduce__(self):
        return (Path, (self._tokens,))

    @property
    def tokens(self):
        return self._tokens

    @property
    def is_root(self):
        return not self._tokens

    @property
    def last_token(self):
        if not self._tokens:
            raise InvalidPathError("The root path has no last token")
        return self._tokens[-1]

    def append(self, token):
        "Return a new path with token added at the end."
        return Path(self._tokens + (token,))

    def parent(self):
        "Return a new path without the last token."
        if not self._tokens:
            raise InvalidPathError("The root path has no parent")
        return Path(self._tokens[:-1])

    def is_descendant_of(self, other):
        """Whether self lies strictly below other.

        Tokens compare by their textual form, so /a/0 is
        below /a whether the index was given as 0 or "0".
        """
        n = len(other._tokens)
        if len(self._tokens) <= n:
            return False
        return all(str(x) == str(y) for x, y in zip(self._tokens[:n], other._tokens))

    def __eq__(self, other):
        if not isinstance(other, Path):
            return NotImplemented
        return self._tokens == other._tokens

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        return hash(self._tokens)

    def __len__(self):
        return len(self._tokens)

    def __iter__(self):
        return iter(self._tokens)

    def __str__(self):
        return JsonPointer.from_parts(self._tokens).path

    def __repr__(self):
        return "Path({!r})".format(str(self))


def resolve(document, path):
    "Return the value at path in document, or Missing."
    node = document
    for token in path:
        node = get_child(node, token)
        if node is Missing:
            break
    return node


def array_index(token, length, allow_append=False):
    """Convert a path token into an index of a list of given length.

    The append marker resolves to length when allow_append is set.
    Bounds are left to the caller.
    """
    if token == APPEND:
        if allow_append:
            return length
        raise PathNotFoundError("The append marker '-' does not name an existing element")
    index = parse_index(token)
    if index is None:
        raise InvalidPathError("Invalid array index {!r}".format(token))
    return index
