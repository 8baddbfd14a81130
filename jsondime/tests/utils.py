# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import copy
import random

from jsondime import patch, diff
from jsondime.patch_format import is_valid_patch, to_dicts, from_dicts
from jsondime.utils import deep_equal


def check_diff_and_patch(a, b, config=None):
    "Check that patch(a, diff(a,b)) reproduces b, and that a is left alone."
    original = copy.deepcopy(a)
    d = diff(a, b, config=config)
    records = to_dicts(d)
    assert is_valid_patch(records)
    assert deep_equal(patch(a, d), b)
    # The wire form must work just as well
    assert deep_equal(patch(a, from_dicts(records)), b)
    assert deep_equal(a, original)
    return d


def check_symmetric_diff_and_patch(a, b, config=None):
    "Check that patch(a, diff(a,b)) reproduces b and vice versa."
    check_diff_and_patch(a, b, config=config)
    check_diff_and_patch(b, a, config=config)


_scalars = [None, True, False, 0, 1, 2, 1.5, "", "a", "b"]


def random_document(rng, depth=3):
    """Make a random json value.

    Small key and value alphabets make equal subtrees likely,
    which exercises moves and copies.
    """
    kinds = ["scalar", "object", "array"] if depth > 0 else ["scalar"]
    kind = rng.choice(kinds)
    if kind == "object":
        return {rng.choice("abcde"): random_document(rng, depth - 1)
                for _ in range(rng.randint(0, 4))}
    elif kind == "array":
        return [random_document(rng, depth - 1) for _ in range(rng.randint(0, 5))]
    return rng.choice(_scalars)


def random_edit(rng, doc, depth=3):
    "Return a modified copy of doc."
    if isinstance(doc, dict) and doc and rng.random() < 0.7:
        doc = dict(doc)
        key = rng.choice(sorted(doc))
        action = rng.random()
        if action < 0.2:
            del doc[key]
        elif action < 0.4:
            doc[rng.choice("abcdefg")] = doc.pop(key)
        else:
            doc[key] = random_edit(rng, doc[key], depth - 1)
        return doc
    elif isinstance(doc, list) and doc and rng.random() < 0.7:
        doc = list(doc)
        index = rng.randrange(len(doc))
        action = rng.random()
        if action < 0.2:
            del doc[index]
        elif action < 0.4:
            doc.insert(rng.randrange(len(doc) + 1), random_document(rng, depth - 1))
        elif action < 0.5:
            doc.append(doc.pop(index))
        else:
            doc[index] = random_edit(rng, doc[index], depth - 1)
        return doc
    return random_document(rng, depth)


def seeded_random(seed):
    return random.Random(seed)
