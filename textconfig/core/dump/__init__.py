"""Serialization of a config back to text, JSON or YAML."""
