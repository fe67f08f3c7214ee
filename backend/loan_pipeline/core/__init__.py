"""Core Layer — pure decision logic, value types and collaborator contracts.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, models/ or db/
    - Stage checks are deterministic given their collaborators' answers

Design Decisions:
    - Functional core separated from imperative shell
"""
