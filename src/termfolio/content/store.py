"""Read-only access to the portfolio records.

``ContentStore`` is the single source of truth the command handlers and
the completion resolver read from. Content comes either from the
built-in default portfolio or from a YAML file with the same shape::

    projects:
      - id: project1
        title: Terminal Portfolio
        description: ...
        repo: https://github.com/...
        demo: https://youtu.be/...
    experiences: [...]
    involvement: [...]
    education: [...]
    about: {summary: ..., skills: [...]}
    contact: {email: ..., links: [{label: GitHub, url: ...}]}
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from termfolio.content.defaults import DEFAULT_PORTFOLIO
from termfolio.content.models import Portfolio, Project

logger = logging.getLogger(__name__)


class ContentStore:
    """Wraps a ``Portfolio`` with the lookups the interpreter needs."""

    def __init__(self, portfolio: Portfolio | None = None) -> None:
        self._portfolio = portfolio if portfolio is not None else DEFAULT_PORTFOLIO

    @property
    def portfolio(self) -> Portfolio:
        return self._portfolio

    def project_ids(self) -> list[str]:
        """Project ids in content order."""
        return [p.id for p in self._portfolio.projects]

    def find_project(self, project_id: str) -> Project | None:
        """Case-insensitive exact match on the project id."""
        wanted = project_id.lower()
        for project in self._portfolio.projects:
            if project.id.lower() == wanted:
                return project
        return None


class ContentError(Exception):
    """Raised when a content file cannot be read or validated."""

    def __init__(self, message: str, path: str = "") -> None:
        super().__init__(message)
        self.path = path


def load_content(path: Path | str | None = None) -> ContentStore:
    """Build a ContentStore from a YAML file.

    A missing or unset path falls back to the built-in portfolio.

    Raises:
        ContentError: If the file exists but is not valid YAML or does
            not match the portfolio shape.
    """
    if path is None:
        return ContentStore()

    path = Path(path)
    if not path.exists():
        logger.warning("Content file %s not found, using built-in portfolio", path)
        return ContentStore()

    try:
        with open(path) as f:
            data = yaml.safe_load(f) or {}
        portfolio = Portfolio.model_validate(data)
    except (yaml.YAMLError, ValidationError) as e:
        raise ContentError(f"Invalid content file {path}: {e}", path=str(path)) from e

    logger.info(
        "Loaded %d projects from %s", len(portfolio.projects), path,
    )
    return ContentStore(portfolio)
