"""Sorting/pagination core and request helpers."""
