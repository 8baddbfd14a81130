# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import codecs
import io
import json
import locale
import os
import re
import sys


class _MissingType(object):
    "Sentinel type, survives copying so identity checks keep working."

    def __repr__(self):
        return "Missing"

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __reduce__(self):
        return "Missing"


# Sentinel to allow None as a value
Missing = _MissingType()

# Array indices in pointer text: no sign, no leading zeros
_index_re = re.compile(r"^(0|[1-9][0-9]*)\Z")


def is_object(node):
    return isinstance(node, dict)


def is_array(node):
    return isinstance(node, list)


def is_container(node):
    return isinstance(node, (dict, list))


def is_scalar(node):
    "Strings, numbers, booleans and null are all scalars."
    return not isinstance(node, (dict, list))


def node_kind(node):
    "Name the JSON kind of node, for messages."
    if is_object(node):
        return "object"
    elif is_array(node):
        return "array"
    elif node is None:
        return "null"
    elif isinstance(node, bool):
        return "boolean"
    elif isinstance(node, (int, float)):
        return "number"
    elif isinstance(node, str):
        return "string"
    raise TypeError("Not a JSON value: {!r}".format(node))


def deep_equal(a, b):
    """Compare two json-like values structurally.

    Unlike ==, booleans never equal numbers, so that
    deep_equal(True, 1) and deep_equal([0], [False]) are both False.
    Integers and floats compare by numeric value.
    """
    if isinstance(a, dict):
        if not isinstance(b, dict) or len(a) != len(b):
            return False
        for key, value in a.items():
            if key not in b or not deep_equal(value, b[key]):
                return False
        return True
    elif isinstance(a, list):
        if not isinstance(b, list) or len(a) != len(b):
            return False
        return all(deep_equal(x, y) for x, y in zip(a, b))
    elif isinstance(a, bool) or isinstance(b, bool):
        return a is b
    elif isinstance(a, (int, float)) and isinstance(b, (int, float)):
        return a == b
    return type(a) is type(b) and a == b


def parse_index(token):
    """Return token as a non-negative list index, or None if it is not one."""
    if isinstance(token, bool):
        return None
    if isinstance(token, int):
        return token if token >= 0 else None
    if isinstance(token, str) and _index_re.match(token):
        return int(token)
    return None


def get_child(node, token):
    """Look up the child of node named by a path token.

    Returns Missing instead of raising when there is no such child,
    including when node is a scalar or token is not a valid index.
    """
    if is_object(node):
        return node.get(str(token), Missing)
    elif is_array(node):
        index = parse_index(token)
        if index is not None and index < len(node):
            return node[index]
    return Missing


def read_json(f):
    """Read and return a json document from a filename or file-like object."""
    if isinstance(f, str):
        with io.open(f, encoding="utf-8") as fo:
            return json.load(fo)
    return json.load(f)


def write_json(obj, f, indent=2):
    """Write json to a filename or file-like object."""
    if isinstance(f, str):
        with io.open(f, "w", encoding="utf-8") as fo:
            json.dump(obj, fo, indent=indent, separators=(",", ": "))
            fo.write("\n")
    else:
        f.write(json.dumps(obj, indent=indent, separators=(",", ": ")))
        f.write("\n")


def _setup_std_stream_encoding():
    """Setup encoding on stdout/err

    Ensures sys.stdout/err have error-escaping encoders,
    rather than raising errors.
    """
    if os.getenv('PYTHONIOENCODING'):
        # setting PYTHONIOENCODING overrides anything we would do here
        return
    _default_encoding = locale.getpreferredencoding() or 'UTF-8'
    for name in ('stdout', 'stderr'):
        stream = getattr(sys, name)
        raw_stream = getattr(sys, '__%s__' % name)
        if stream is not raw_stream:
            # don't wrap captured or redirected output
            continue
        enc = getattr(stream, 'encoding', None) or _default_encoding
        errors = getattr(stream, 'errors', None) or 'strict'
        # if error-handler is strict, switch to replace
        if errors == 'strict' or errors.startswith('surrogate'):
            bin_stream = stream.buffer
            new_stream = codecs.getwriter(enc)(bin_stream, errors='backslashreplace')
            setattr(sys, name, new_stream)


def setup_std_streams():
    """Setup sys.stdout/err

    - Ensures sys.stdout/err have error-escaping encoders,
      rather than raising errors.
    - enables colorama for ANSI escapes on Windows
    """
    _setup_std_stream_encoding()
    # must enable colorama after setting up encoding,
    # or encoding will undo colorama setup
    if sys.platform.startswith('win'):
        import colorama
        colorama.init()
