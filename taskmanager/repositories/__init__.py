"""Repositories — async query helpers over an AsyncSession, one per entity.

Invariants:
    - Repositories never commit; the owning service commits once per operation
    - Every list/count query is scoped by user_id
"""
