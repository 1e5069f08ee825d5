"""Catalog articles."""
