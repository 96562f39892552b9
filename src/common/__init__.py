# -*- coding: utf-8 -*-
"""Shared building blocks.

The strided access-pattern layer lives in ``src.common.tensors``; import
from there.
"""
