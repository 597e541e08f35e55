"""SPOT client package.

This package is organized by feature modules (sections, seats, attendance, ...)
with a thin Flask screen layer, view-model state holders and typed API
repositories talking to the SPOT backend.
"""
