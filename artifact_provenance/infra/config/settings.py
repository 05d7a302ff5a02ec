from functools import cached_property

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from artifact_provenance.infra.config.groups import GitHubConfig, ObservabilityConfig


class Settings(BaseSettings):
    """
    Artifact Provenance Settings

    Environment variables should use ARTIFACT_PROVENANCE_ prefix.
    Example: ARTIFACT_PROVENANCE_GITHUB_TOKEN, ARTIFACT_PROVENANCE_PAGE_SIZE

    그룹화된 설정 접근:
        settings.github         # GitHubConfig
        settings.observability  # ObservabilityConfig
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="ARTIFACT_PROVENANCE_",
        extra="ignore",  # 알 수 없는 환경 변수 무시
        populate_by_name=True,
    )

    # ========================================================================
    # Grouped Config Accessors
    # ========================================================================

    @cached_property
    def github(self) -> GitHubConfig:
        """GitHub API 설정 그룹."""
        return GitHubConfig(
            token=self.github_token,
            api_url=self.github_api_url,
            web_url=self.github_web_url,
            accept=self.github_accept,
            timeout=self.http_timeout,
            page_size=self.page_size,
        )

    @cached_property
    def observability(self) -> ObservabilityConfig:
        """로깅 설정 그룹."""
        return ObservabilityConfig(
            log_level=self.log_level,
            log_format=self.log_format,
        )

    # ========================================================================
    # GitHub
    # ========================================================================
    # Plain GITHUB_TOKEN is honoured as well, matching the gh CLI convention
    github_token: str | None = Field(
        default=None,
        validation_alias=AliasChoices("ARTIFACT_PROVENANCE_GITHUB_TOKEN", "GITHUB_TOKEN"),
    )
    github_api_url: str = "https://api.github.com"
    github_web_url: str = "https://github.com"
    github_accept: str = "application/vnd.github.v3+json"
    http_timeout: float = 30.0
    page_size: int = Field(default=100, ge=1, le=100)

    # ========================================================================
    # Observability
    # ========================================================================
    log_level: str = "INFO"
    log_format: str = "console"


# Eager loading (module-level instantiation)
settings = Settings()
