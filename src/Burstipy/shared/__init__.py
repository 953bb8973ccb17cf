# -*- coding: utf-8 -*-
"""
Shared utilities for Burstipy: constants, exceptions, logging and figure export.
"""
