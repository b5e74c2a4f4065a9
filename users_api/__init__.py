"""Users API: CRUD HTTP service over a single `users` table.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
