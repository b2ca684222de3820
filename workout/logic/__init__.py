"""Core business logic layer.

Subpackages:
- schedule: resolving a plan against calendar days
- reporting: completion, weekly and streak statistics
"""
__all__ = ["schedule", "reporting"]
