# -*- coding: utf-8 -*-
"""
Burstipy core: result types, detection configuration and analysis functions.
"""
