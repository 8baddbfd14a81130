# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .config import DiffConfig
from .generic import diff, diff_operations

__all__ = ["diff", "diff_operations", "DiffConfig"]
