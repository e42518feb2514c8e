# MIT License
# Copyright (c) 2025 Matt / Grain Ecosystem

"""Dreamlog CLI commands."""
