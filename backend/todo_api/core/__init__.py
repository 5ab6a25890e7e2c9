"""Core Layer — domain types, errors, outcomes and protocols. No IO, no framework imports.

Invariants:
    - No module in core/ imports from services/, api/ or infrastructure/
    - All functions are pure and deterministic
"""
