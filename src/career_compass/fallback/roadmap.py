"""Offline learning and skill roadmaps used when the AI backend is unavailable."""

from __future__ import annotations

from career_compass.models.roadmap import LearningRoadmap, SkillRoadmap

# keyword -> (topics per phase, project titles)
TECH_MAP: dict[str, tuple[list[str], list[str]]] = {
    "react": (
        ["Hooks & Context API", "Performance Profiling with DevTools", "Next.js 14 Server Components"],
        ["Personalized E-commerce Dashboard", "Real-time Analytics Component Library"],
    ),
    "python": (
        ["AsyncIO & Concurrency", "Data Science Pipelines (Pandas/NumPy)", "FastAPI Microservices"],
        ["AI-Driven Sentiment Engine", "Automated Distributed Task Queue"],
    ),
    "rust": (
        ["Memory Safety & Borrow Checker", "WASM Integration", "Systems Level Optimization"],
        ["Custom Network Protocol Parser", "High-Performance Search Engine Core"],
    ),
    "javascript": (
        ["Modern ESNext & TypeScript", "Node.js Event Loop Mastery", "Complex State Machines"],
        ["Fullstack real-time collaboration app", "Custom Framework Middleware"],
    ),
    "java": (
        ["JVM Internals & GC Tuning", "Spring Boot Microservices", "Reactive Programming"],
        ["Cloud-Native Banking API", "Distributed Cache Implementation"],
    ),
}


def _lookup(tech_name: str) -> tuple[list[str], list[str]]:
    t = tech_name.lower()
    # "javascript" is checked before "java" so the longer keyword wins
    for keyword, entry in TECH_MAP.items():
        if keyword in t:
            return entry
    return (
        [f"{tech_name} Core Architecture", "Performance Tuning", "Security Best Practices"],
        [f"Enterprise {tech_name} Management Solution", f"{tech_name} Performance Diagnostic Tool"],
    )


def synthesize_learning_roadmap(tech_name: str) -> LearningRoadmap:
    topics, projects = _lookup(tech_name)

    return LearningRoadmap.model_validate(
        {
            "techName": tech_name,
            "objective": f"Master {tech_name} to reach expert-level proficiency and architectural mastery.",
            "phases": {
                "foundations": {
                    "title": f"{tech_name} Architecture Foundations",
                    "description": f"Establish a rock-solid understanding of {tech_name} core mechanics and environment setup.",
                    "keyTopics": [topics[0], f"{tech_name} Ecosystem Overview", "Syntax Best Practices"],
                    "estimatedTime": "2-4 Weeks",
                },
                "intermediate": {
                    "title": f"{tech_name} Systems Engineering",
                    "description": f"Move from basic syntax to building robust real-world systems with {tech_name}.",
                    "keyTopics": [topics[1], "Advanced Design Patterns", "Automated Testing"],
                    "estimatedTime": "4-8 Weeks",
                },
                "advanced": {
                    "title": f"{tech_name} Expert Mastery",
                    "description": "Specialized knowledge in high-scale performance, security, and distribution.",
                    "keyTopics": [topics[2], "Distributed Systems Scaling", "Security Hardening"],
                    "estimatedTime": "8-12 Weeks",
                },
            },
            "projects": [
                {
                    "title": projects[0],
                    "description": "A comprehensive project covering core engineering principles.",
                    "difficulty": "Intermediate",
                },
                {
                    "title": projects[1],
                    "description": "High-level implementation challenging expert architectural skills.",
                    "difficulty": "Advanced",
                },
            ],
            "careerPaths": [
                {
                    "role": f"Senior {tech_name} Engineer",
                    "salaryRange": "$140k - $210k",
                    "requiredSkills": [tech_name, "System Design", "Mentoring"],
                },
                {
                    "role": "Technical Architect",
                    "salaryRange": "$180k - $250k",
                    "requiredSkills": [tech_name, "Cloud Infrastructure", "Strategic Planning"],
                },
            ],
            "resources": [
                {"name": f"Official {tech_name} Documentation", "type": "Docs", "url": "#"},
                {"name": f"Mastering {tech_name} Advanced Patterns", "type": "Course", "url": "#"},
            ],
            "source": "fallback",
        }
    )


def synthesize_skill_roadmap(skill_name: str) -> SkillRoadmap:
    phases = [
        ("Phase 1: Fundamentals", "Weeks 1-4", "Core concepts and tooling.", "fa-book", "Basics"),
        ("Phase 2: Applied Practice", "Weeks 5-10", "Build real projects with guidance.", "fa-code", "Projects"),
        ("Phase 3: Mastery", "Weeks 11-16", "Optimize, specialize and teach others.", "fa-trophy", "Specialization"),
    ]
    return SkillRoadmap.model_validate(
        {
            "title": f"Learning Path for {skill_name}",
            "subtitle": "AI-Generated Roadmap (Fallback)",
            "description": f"A structured approach to mastering {skill_name}.",
            "keyTopics": [
                "Fundamentals", "Intermediate", "Advanced", "Specialization",
                "Real-world", "Optimization", "Mastery",
            ],
            "phases": [
                {
                    "title": title,
                    "period": period,
                    "description": description,
                    "skills": [
                        {
                            "name": f"{skill_name} {focus}",
                            "icon": icon,
                            "details": f"{focus} of {skill_name}.",
                            "criticalSteps": [
                                f"1. Study {skill_name} {focus.lower()} material",
                                "2. Complete a hands-on exercise",
                            ],
                            "masteryContent": [f"Explain {skill_name} {focus.lower()} to a peer"],
                        }
                    ],
                }
                for title, period, description, icon, focus in phases
            ],
            "source": "fallback",
        }
    )
