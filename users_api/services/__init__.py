"""Services Layer: validation and result interpretation for each operation.

Invariants:
    - Services talk to the database only through core.repository_protocols
"""
