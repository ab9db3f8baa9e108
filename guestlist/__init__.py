"""Guestlist Application Package - invite issuing and door scanning.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
