#!/usr/bin/env python3
"""
Setup shim for Burstipy.
Kept for tools that still call setup.py directly.
"""

from setuptools import setup

# All configuration lives in pyproject.toml
setup()
