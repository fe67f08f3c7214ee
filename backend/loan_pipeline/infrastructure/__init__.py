"""Infrastructure Layer — database access, collaborator adapters and logging.

Invariants:
    - Adapters implement core/repository_protocols.py structurally (no inheritance)
    - SQL adapters only stage rows; the caller owns the transaction

Design Decisions:
    - Adapters depend on core types, core never depends on adapters
"""
