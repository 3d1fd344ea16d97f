"""Configuration for dartsym."""

from dataclasses import dataclass
from pathlib import Path

DEFAULT_MAX_RESULTS = 500


@dataclass(frozen=True)
class Config:
    """Application configuration."""

    sdk_path: Path | None = None
    workspace_roots: tuple[Path, ...] = ()
    max_results: int = DEFAULT_MAX_RESULTS
    request_timeout: float = 30.0

    @property
    def analysis_roots(self) -> list[str]:
        return [str(root.resolve()) for root in self.workspace_roots]
