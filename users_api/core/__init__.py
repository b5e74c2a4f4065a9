"""Core Layer: errors, boundary protocols and pure statement-building logic.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - No IO in core/
"""
