# MIT License
# Copyright (c) 2025 Matt / Grain Ecosystem

"""Dreamlog - score, rank and summarize dream journals."""

__version__ = "0.1.0"
