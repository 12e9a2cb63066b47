"""Structural patterns: how objects are composed into larger structures."""
