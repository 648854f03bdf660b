"""Core Layer — pure helpers for money, dates, pagination and chart axes.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Everything here is synchronous and free of IO

Design Decisions:
    - Formatting and pagination kept out of the query services so routes and
      tests use them without a database
"""
