"""
Asynchronous optimizer job layer.

Runs long program-optimization procedures on Celery workers, publishes
progress to a status record, and stores the terminal outcome with a bounded
lifetime for later retrieval.
"""

__version__ = "0.1.0"
