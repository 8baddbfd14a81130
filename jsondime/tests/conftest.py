# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import json

from pytest import fixture, skip


@fixture
def slow(request):
    if request.config.getoption('--quick', default=False):
        skip('skipping slow test')


@fixture
def json_files(tmpdir):
    """Fixture writing json documents to files in a temporary directory.

    Call the returned function with name=value pairs,
    it returns a dict of name to filename.
    """
    def write(**docs):
        filenames = {}
        for name, doc in docs.items():
            f = tmpdir.join(name + '.json')
            f.write_text(json.dumps(doc), encoding='utf-8')
            filenames[name] = str(f)
        return filenames
    return write
