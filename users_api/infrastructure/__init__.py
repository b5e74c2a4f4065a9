"""Infrastructure Layer: database pool and logging setup.

Invariants:
    - Infrastructure never imports from services/ or api/
    - Driver exceptions never leave this layer untranslated
"""
