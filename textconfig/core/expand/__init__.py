"""Reference expansion engine.

A single left-to-right scanner resolves `$name` and `${name}` against the raw
values of a store; a bounded driver re-runs it so values may reference keys
whose own values hold further references.
"""
