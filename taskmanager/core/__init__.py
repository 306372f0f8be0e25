"""Core Layer — pure domain logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - All functions are pure and deterministic (clock passed in or isolated in utc_now)

Design Decisions:
    - Functional core separated from imperative shell: services query, core computes
"""
