"""Services Layer — read queries and form actions over the store.

Invariants:
    - Queries surface store faults as FetchError only
    - Actions return InvoiceFormState on failure and redirect on success

Design Decisions:
    - One module per resource, split into queries and actions
"""
