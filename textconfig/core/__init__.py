"""Core library: parsing, storage, expansion, loading and diagnostics."""
