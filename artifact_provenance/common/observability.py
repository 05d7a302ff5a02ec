"""
Common observability utilities.

Re-exports logging helpers from the infra layer so the domain and service
layers can import them without depending on infra internals.
"""

from artifact_provenance.infra.observability import LogPerformance, get_logger

__all__ = [
    "get_logger",
    "LogPerformance",
]
