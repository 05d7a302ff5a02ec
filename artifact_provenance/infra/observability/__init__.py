from artifact_provenance.infra.observability.logging import (
    LogPerformance,
    bind_context,
    clear_context,
    get_logger,
    log_performance,
    setup_logging,
)

__all__ = [
    "setup_logging",
    "get_logger",
    "bind_context",
    "clear_context",
    "log_performance",
    "LogPerformance",
]
