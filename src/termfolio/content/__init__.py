"""Portfolio content for termfolio.

The record collections (projects, experience, involvement, education)
plus the about and contact blurbs that the command handlers display.
"""

from termfolio.content.models import (
    About,
    Contact,
    ContactLink,
    Education,
    Experience,
    Involvement,
    Portfolio,
    Project,
)
from termfolio.content.store import ContentError, ContentStore, load_content

__all__ = [
    "About",
    "Contact",
    "ContactLink",
    "ContentError",
    "ContentStore",
    "Education",
    "Experience",
    "Involvement",
    "Portfolio",
    "Project",
    "load_content",
]
