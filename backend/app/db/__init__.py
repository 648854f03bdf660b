"""Database Infrastructure — declarative base, session factory and seed script.

Invariants:
    - Single async engine per process for the API (initialized via init_db)
    - Scripts (seed, migrations) build their own short-lived engine

Design Decisions:
    - asyncpg driver for PostgreSQL (native async, no thread pool overhead)
"""
