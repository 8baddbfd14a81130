# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import copy

import pytest

from jsondime.errors import InvalidPathError, PathNotFoundError
from jsondime.pointer import APPEND, Path, resolve, array_index
from jsondime.utils import Missing


def test_parse_and_format():
    assert Path.parse("").tokens == ()
    assert Path.parse("/a/b").tokens == ("a", "b")
    assert Path.parse("/a/0").tokens == ("a", "0")
    assert Path.parse("/").tokens == ("",)
    # Escaped characters
    p = Path.parse("/a~1b/c~0d")
    assert p.tokens == ("a/b", "c~d")
    assert str(p) == "/a~1b/c~0d"
    assert str(Path(("a", 0, "-"))) == "/a/0/-"
    assert str(Path()) == ""


def test_parse_invalid():
    with pytest.raises(InvalidPathError):
        Path.parse("a/b")
    with pytest.raises(InvalidPathError):
        Path.parse("/a~2")
    with pytest.raises(InvalidPathError):
        Path.parse(3)


def test_invalid_tokens():
    with pytest.raises(InvalidPathError):
        Path(("a", -1))
    with pytest.raises(TypeError):
        Path((True,))
    with pytest.raises(TypeError):
        Path((1.5,))


def test_append_and_parent():
    root = Path()
    assert root.is_root
    p = root.append("a")
    q = p.append(2)
    assert root.is_root
    assert p.tokens == ("a",)
    assert q.tokens == ("a", 2)
    assert q.last_token == 2
    assert q.parent() == p
    assert q.parent().parent() == root
    assert not q.is_root
    with pytest.raises(InvalidPathError):
        root.parent()
    with pytest.raises(InvalidPathError):
        root.last_token


def test_immutable():
    p = Path.parse("/a")
    with pytest.raises(AttributeError):
        p._tokens = ("b",)
    assert copy.deepcopy(p) == p


def test_equality_and_hash():
    assert Path.parse("/a/b") == Path(["a", "b"])
    assert Path.parse("/a/b") != Path.parse("/a")
    assert len({Path.parse("/a"), Path(("a",)), Path.parse("/b")}) == 2
    # Tokens are compared as given
    assert Path(("a", 0)) != Path.parse("/a/0")
    assert Path.parse("/a") != "/a"


def test_is_descendant_of():
    a = Path.parse("/a")
    assert Path.parse("/a/b").is_descendant_of(a)
    assert Path(("a", 0, "c")).is_descendant_of(Path.parse("/a/0"))
    assert Path.parse("/a").is_descendant_of(Path())
    assert not a.is_descendant_of(a)
    assert not Path.parse("/ab").is_descendant_of(a)
    assert not Path().is_descendant_of(Path())
    assert not a.is_descendant_of(Path.parse("/a/b"))


def test_resolve():
    doc = {"a": [{"b": 1}, None], "": 5, "x/y": 2}
    assert resolve(doc, Path()) is doc
    assert resolve(doc, Path.parse("/a/0/b")) == 1
    assert resolve(doc, Path(("a", 0, "b"))) == 1
    assert resolve(doc, Path.parse("/a/1")) is None
    assert resolve(doc, Path.parse("/")) == 5
    assert resolve(doc, Path.parse("/x~1y")) == 2
    assert resolve(doc, Path.parse("/a/2")) is Missing
    assert resolve(doc, Path.parse("/a/01")) is Missing
    assert resolve(doc, Path.parse("/a/-")) is Missing
    assert resolve(doc, Path.parse("/a/0/b/c")) is Missing
    assert resolve(doc, Path.parse("/nope/deeper")) is Missing


def test_array_index():
    assert array_index("0", 3) == 0
    assert array_index(2, 3) == 2
    assert array_index("7", 3) == 7
    assert array_index(APPEND, 3, allow_append=True) == 3
    with pytest.raises(PathNotFoundError):
        array_index(APPEND, 3)
    for token in ("01", "x", "-1", "+1", " 1", ""):
        with pytest.raises(InvalidPathError):
            array_index(token, 3)
