"""Catalog categories and subcategories."""
