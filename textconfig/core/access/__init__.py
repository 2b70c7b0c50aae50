"""Permissive numeric conversion for typed accessors."""
