"""Creational patterns: how objects get constructed."""
