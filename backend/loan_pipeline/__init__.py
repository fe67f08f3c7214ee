"""Loan Decision Pipeline — adjudicates loan applications through ordered checks.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
