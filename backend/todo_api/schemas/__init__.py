"""Pydantic Schemas — request records and response envelope shapes for the API.

Invariants:
    - Schemas validate at system boundary (query strings, JSON bodies)
    - Field bounds come from core/domain_types.py
"""
