"""Offline job listings used when the AI backend is unavailable."""

from __future__ import annotations

from urllib.parse import quote_plus

from career_compass.models.job import Job

COMPANIES = ("TechNova", "Stellar AI", "Nexus Systems")
LOCATIONS = ("Remote", "San Francisco, CA", "New York, NY", "London, UK")
POSTED = ("Just now", "1 day ago", "3 days ago", "1 week ago")
DEFAULT_TITLE = "AI Engineer"


def synthesize_jobs(query: str = "", count: int = 20) -> list[Job]:
    """Generate ``count`` listings titled after the query."""
    title = query.strip() or DEFAULT_TITLE
    jobs = []
    for i in range(count):
        company = COMPANIES[i % len(COMPANIES)]
        jobs.append(
            Job(
                id=f"fallback-{i}",
                title=title,
                company=company,
                location=LOCATIONS[i % len(LOCATIONS)],
                salary="$120k - $160k",
                tags=["Hybrid", "AI"],
                description=f"Join {company} as a {title} and ship production AI features.",
                stack=["Python", "React", "PyTorch"],
                posted_at=POSTED[i % len(POSTED)],
                logo=f"https://ui-avatars.com/api/?name={quote_plus(company)}",
                apply_url="#",
            )
        )
    return jobs
