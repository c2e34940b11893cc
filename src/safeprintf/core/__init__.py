# topmark:header:start
#
#   project      : SafePrintf
#   file         : __init__.py
#   file_relpath : src/safeprintf/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core data model of SafePrintf: conversion specs, character kinds and errors.

These modules are dependency-free (apart from logging) so that the parser, the
renderer and the CLI can all share them without import cycles.
"""

from __future__ import annotations
