"""Todo API Package — request-handling boundary for todo management.

Invariants:
    - Package root contains no executable code beyond the version constant
"""

__version__ = "0.1.0"
