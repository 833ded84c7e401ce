"""Core Layer - pure validation logic, no IO, no logging, no settings.

Invariants:
    - No module in core/ imports from infrastructure/, config, or main
    - All functions are pure and deterministic (given pure rule predicates)

Design Decisions:
    - Functional core separated from imperative shell (ADR: impureim sandwich)
"""
