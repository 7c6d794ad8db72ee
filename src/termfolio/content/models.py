"""Portfolio record models.

The interpreter treats almost every field here as an opaque display
string. The one thing it relies on is that each project carries a stable,
unique ``id`` used by ``open`` and by argument completion.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Project(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1, description="Unique short name, e.g. 'project1'")
    title: str
    description: str
    repo: str = Field(description="Repository URL")
    demo: str = Field(description="Demo URL (or a placeholder such as '[DEMO PENDING]')")


class Experience(BaseModel):
    model_config = ConfigDict(frozen=True)

    company: str
    title: str
    period: str
    bullets: list[str] = Field(default_factory=list)


class Involvement(BaseModel):
    model_config = ConfigDict(frozen=True)

    org: str
    role: str
    details: str
    url: str | None = None


class Education(BaseModel):
    model_config = ConfigDict(frozen=True)

    school: str
    degree: str
    period: str
    notes: str | None = None


class About(BaseModel):
    model_config = ConfigDict(frozen=True)

    summary: str = ""
    skills: list[str] = Field(default_factory=list)
    location: str | None = None


class ContactLink(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str
    url: str


class Contact(BaseModel):
    model_config = ConfigDict(frozen=True)

    email: str | None = None
    repo: str | None = Field(default=None, description="Source repository of the site itself")
    links: list[ContactLink] = Field(default_factory=list)


class Portfolio(BaseModel):
    """Everything the command handlers can display."""

    model_config = ConfigDict(frozen=True)

    projects: list[Project] = Field(default_factory=list)
    experiences: list[Experience] = Field(default_factory=list)
    involvement: list[Involvement] = Field(default_factory=list)
    education: list[Education] = Field(default_factory=list)
    about: About = Field(default_factory=About)
    contact: Contact = Field(default_factory=Contact)

    @model_validator(mode="after")
    def _unique_project_ids(self) -> Portfolio:
        seen: set[str] = set()
        for project in self.projects:
            key = project.id.lower()
            if key in seen:
                raise ValueError(f"Duplicate project id: {project.id}")
            seen.add(key)
        return self
