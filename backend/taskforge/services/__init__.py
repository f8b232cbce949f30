"""Services — data-access wrappers between routes and the ORM.

Invariants:
    - Services take an AsyncSession; they never open their own
    - Not-found is a return value (None / False), never an exception

Design Decisions:
    - One generic repository instead of one module per custom entity
"""
