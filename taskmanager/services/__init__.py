"""Services Layer — validation, ownership checks and orchestration over repositories.

Invariants:
    - Every service method takes the requesting user id first
    - Services raise core errors; they never build HTTP responses
    - Each write method commits exactly once
"""
