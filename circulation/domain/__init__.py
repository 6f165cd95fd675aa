"""Domain layer - circulation entities and operation results.

Plain models with no knowledge of policies, presentation or logging.
"""
