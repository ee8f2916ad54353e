"""
Test suite for bignum-engine

Contains:
- tests/unit/          : Unit tests for engine, models, contracts, evaluator, demo
"""
