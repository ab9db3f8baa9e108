"""Core Layer - invite domain types, key policy, errors and storage contracts.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Key derivation is pure; IO only appears behind repository_protocols
"""
