from artifact_provenance.infra.config.groups import GitHubConfig, ObservabilityConfig
from artifact_provenance.infra.config.settings import Settings, settings

__all__ = [
    # Settings
    "Settings",
    "settings",
    # Config Groups
    "GitHubConfig",
    "ObservabilityConfig",
]
