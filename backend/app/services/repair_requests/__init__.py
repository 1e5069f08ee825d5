"""Repair request management."""
