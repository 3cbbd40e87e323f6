"""Services Layer — orchestrates the pure core around persistence and timing.

Invariants:
    - Services own every IO call (preference store, application repository)
    - Core functions are called with fully-loaded inputs and return new values
"""
