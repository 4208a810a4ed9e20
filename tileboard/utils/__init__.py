# -*- coding: utf-8 -*-
"""
This module provides utilities for encoding board snapshots as binary observations.
"""

from .binary import encode, encode_flatten

__all__ = ["encode", "encode_flatten"]
