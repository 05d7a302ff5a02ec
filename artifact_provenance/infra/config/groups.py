"""
설정 그룹 정의.

Settings를 논리적 그룹으로 분리하여 관리합니다.
각 그룹은 독립적으로 사용 가능하며, Settings에서 통합됩니다.
"""

from pydantic import BaseModel, Field


class GitHubConfig(BaseModel):
    """GitHub REST API 설정."""

    token: str | None = Field(default=None, description="Personal access token")
    api_url: str = Field(default="https://api.github.com", description="REST API base URL")
    web_url: str = Field(default="https://github.com", description="Web UI base URL (fallback links)")
    accept: str = Field(default="application/vnd.github.v3+json", description="Accept header")
    timeout: float = Field(default=30.0, ge=1.0, description="HTTP timeout (초)")
    page_size: int = Field(default=100, ge=1, le=100, description="List endpoint page size")

    def actions_url(self, repository: str) -> str:
        """Repository-level actions overview URL."""
        return f"{self.web_url.rstrip('/')}/{repository}/actions"


class ObservabilityConfig(BaseModel):
    """로깅 설정."""

    log_level: str = Field(default="INFO", description="Log level")
    log_format: str = Field(default="console", description="console | json")
