"""Infrastructure Layer - cross-cutting concerns for the shell (logging).

Invariants:
    - Infrastructure never imports from core/ domain logic
"""
