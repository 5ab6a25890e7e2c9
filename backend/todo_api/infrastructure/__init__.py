"""Infrastructure Layer — external service clients and cross-cutting concerns.

Invariants:
    - External call failures mapped to typed errors (core/errors.py)
"""
