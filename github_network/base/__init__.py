"""Base layer: errors, logging, HTTP pool, retry policy, models and DTOs.

Nothing in this package imports from ``api``, ``html`` or ``service``.
"""
