# -*- coding: utf-8 -*-
"""Ayurwell wellness backend: prakriti assessment and dosha analytics."""

__version__ = "0.1.0"
