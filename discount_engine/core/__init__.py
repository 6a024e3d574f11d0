"""
Core domain models, numeric primitives, error taxonomy and contracts.

Nothing in this package knows about the individual discount rules.
"""
