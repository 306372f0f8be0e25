"""Infrastructure Layer — database session management and logging setup.

Invariants:
    - Infrastructure never imports from services/ or api/
    - Driver exceptions are mapped to core errors before leaving this layer
"""
