from __future__ import annotations

# Order matters: keyword extraction walks these lists in order and
# industry context picks the first industry term present.

TECHNICAL_TERMS: tuple[str, ...] = (
    # languages
    "javascript",
    "typescript",
    "python",
    "java",
    "c#",
    "c++",
    "php",
    "ruby",
    "go",
    "rust",
    "swift",
    "kotlin",
    "scala",
    # frontend
    "react",
    "vue",
    "angular",
    "svelte",
    "html",
    "css",
    "sass",
    "less",
    "tailwind",
    "bootstrap",
    # backend
    "node.js",
    "express",
    "django",
    "flask",
    "spring",
    "laravel",
    "rails",
    "asp.net",
    # data stores
    "sql",
    "mysql",
    "postgresql",
    "mongodb",
    "redis",
    "elasticsearch",
    "cassandra",
    "dynamodb",
    # cloud and devops
    "aws",
    "azure",
    "gcp",
    "docker",
    "kubernetes",
    "jenkins",
    "gitlab",
    "github",
    "terraform",
    "ansible",
    # tooling
    "git",
    "jira",
    "confluence",
    "figma",
    "sketch",
    "photoshop",
    "tableau",
    "power bi",
)

SOFT_TERMS: tuple[str, ...] = (
    "leadership",
    "communication",
    "teamwork",
    "problem-solving",
    "analytical",
    "creative",
    "innovative",
    "collaborative",
    "adaptable",
    "flexible",
    "organized",
    "detail-oriented",
    "time management",
    "project management",
    "critical thinking",
    "decision making",
    "negotiation",
    "presentation",
)

INDUSTRY_TERMS: tuple[str, ...] = (
    "fintech",
    "healthcare",
    "e-commerce",
    "saas",
    "b2b",
    "b2c",
    "startup",
    "enterprise",
    "agile",
    "scrum",
    "kanban",
    "waterfall",
    "lean",
    "six sigma",
    "devops",
    "mlops",
)

BENEFIT_PHRASES: tuple[str, ...] = (
    "health insurance",
    "dental",
    "vision",
    "401k",
    "retirement",
    "vacation",
    "pto",
    "flexible hours",
    "remote work",
    "stock options",
)

# (label, any of these phrases, all of these phrases)
RED_FLAG_RULES: tuple[tuple[str, tuple[str, ...], tuple[str, ...]], ...] = (
    ("Unpaid position", ("unpaid", "no salary"), ()),
    ("Potentially undefined role scope", ("wear many hats", "jack of all trades"), ()),
    ("High stress environment indicated", (), ("fast-paced", "high-pressure")),
    ("Unprofessional job title terminology", ("rockstar", "ninja", "guru"), ()),
)
