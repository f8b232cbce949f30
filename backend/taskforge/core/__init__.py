"""Core — pure domain logic: validators, rule pipeline, roles, pagination, errors.

Invariants:
    - No I/O in this package (no DB sessions, no HTTP objects)
    - Everything here is importable and testable without a running app
"""
