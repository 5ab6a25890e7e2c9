"""API Layer — FastAPI routes, envelope rendering and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Every /todo response goes through envelope.render()
"""
