"""Infrastructure Layer — persistence client, identity, revalidation and logging.

Invariants:
    - Store faults leave this layer only as DatabaseError
    - Process-wide singletons are reached through FastAPI dependencies

Design Decisions:
    - Collaborators are injected into services so tests can swap them
"""
