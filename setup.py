#!/usr/bin/env python
# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.
from setuptools import setup, find_packages
import pathlib
import re

HERE = pathlib.Path(__file__).parent.absolute()

JSONDIME_PATH = HERE / "jsondime"


def get_version(path):
    match = re.search(r"^__version__ = ['\"]([^'\"]*)['\"]", path.read_text(), re.M)
    if not match:
        raise RuntimeError("failed to parse version")
    return match.group(1)


VERSION = get_version(JSONDIME_PATH / '_version.py')

with open(HERE / 'README.md') as f:
    LONG_DESCRIPTION = f.read()


install_requires = [
    "colorama",
    "jsonpointer>=2.0",
    "jsonschema",
    "jupyter_core",
    "traitlets>=5",
]

extras_require = {
    "test": [
        "pytest>=6.0",
    ],
}


if __name__ == '__main__':
    setup(
        name="jsondime",
        version=VERSION,
        description="Structural diff and patch of json documents (JSON Patch with omit)",
        long_description=LONG_DESCRIPTION,
        long_description_content_type="text/markdown",
        license="BSD",
        packages=find_packages(include=["jsondime", "jsondime.*"]),
        package_data={"jsondime": ["*.schema.json"]},
        python_requires=">=3.8",
        install_requires=install_requires,
        extras_require=extras_require,
        entry_points={
            "console_scripts": [
                "jsondime = jsondime.__main__:main_dispatch",
                "jsondime-diff = jsondime.diffapp:main",
                "jsondime-patch = jsondime.patchapp:main",
            ],
        },
    )
