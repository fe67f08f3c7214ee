"""Services Layer — decision pipeline orchestration and outcome finalization.

Invariants:
    - Services call pure core functions and collaborator protocols, never the DB directly

Design Decisions:
    - One class per responsibility: DecisionPipeline decides, OutcomeFinalizer records
"""
