"""Core Layer — pure criteria logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, models/ or db/
    - All functions are pure and deterministic (today's date is always a parameter)
    - No core function raises for malformed criteria input; failures are return values

Design Decisions:
    - Functional core separated from imperative shell (impureim sandwich)
"""
