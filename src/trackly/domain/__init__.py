"""Domain layer for TRACKLY.

Contains business rules: entities, value objects, the holiday registry, the
calendar aggregator, tier pricing and the VIP residency workflow. This package
is deliberately technology-agnostic and performs no I/O.

Dependency rule: do not import from `trackly.adapters` or `trackly.entrypoints`.
"""
