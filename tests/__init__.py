"""
Test suite for discount-engine

Contains:
- tests/unit/          : Unit tests for rules, state view, orchestrator and contracts
"""
