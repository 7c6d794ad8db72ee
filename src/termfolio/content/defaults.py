"""Built-in portfolio used when no content file is configured.

Edit a YAML content file (see ``load_content``) rather than this module
to showcase your own projects, experience, involvement and education.
"""

from __future__ import annotations

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

DEFAULT_PORTFOLIO = Portfolio(
    projects=[
        Project(
            id="project1",
            title="Terminal Portfolio",
            description="A retro terminal-style single-page portfolio with interactive commands and project demos.",
            repo="https://github.com/yourname/terminal-portfolio",
            demo="https://youtu.be/dQw4w9WgXcQ",
        ),
        Project(
            id="project2",
            title="CLI-Notes",
            description="A minimal note-taking app that runs in the terminal with search and tags.",
            repo="https://github.com/yourname/cli-notes",
            demo="https://youtu.be/example2",
        ),
        Project(
            id="project3",
            title="Retro-Game",
            description="A small JS game with pixel-art and chiptune audio, playable in-browser.",
            repo="https://github.com/yourname/retro-game",
            demo="https://youtu.be/example3",
        ),
    ],
    experiences=[
        Experience(
            company="Acme Corp",
            title="Frontend Engineer",
            period="2022 - Present",
            bullets=[
                "Built responsive, accessible web applications using React and vanilla JS",
                "Improved core metrics by optimizing bundle size and rendering performance",
            ],
        ),
        Experience(
            company="Startup Labs",
            title="Fullstack Developer",
            period="2019 - 2022",
            bullets=[
                "Implemented REST APIs and small Node services",
                "Delivered multiple client projects, focusing on UX and reliability",
            ],
        ),
    ],
    involvement=[
        Involvement(
            org="Open Source Contributor",
            role="Maintainer / Contributor",
            details="Contributed bug fixes and documentation to several OSS projects.",
        ),
        Involvement(
            org="Local Meetups",
            role="Speaker / Organizer",
            details="Presented talks about frontend performance and developer tooling.",
            url="https://www.meetup.com/",
        ),
    ],
    education=[
        Education(
            school="State University",
            degree="B.S. in Computer Science",
            period="2015 - 2019",
            notes="Relevant coursework: Algorithms, Systems, Web Development",
        ),
    ],
    about=About(
        summary="Hi, I'm a developer who loves building small tools and polished web experiences.",
        skills=["JavaScript", "Node", "CSS", "UX"],
    ),
    contact=Contact(
        email="you@example.com",
        repo="https://github.com/yourname/terminal-portfolio",
        links=[
            ContactLink(label="GitHub", url="https://github.com/yourname"),
            ContactLink(label="LinkedIn", url="https://www.linkedin.com/in/yourname"),
        ],
    ),
)
