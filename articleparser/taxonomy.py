"""Keyword taxonomies used to suggest a category and tags for an article.

Each table maps a slug to the keyword phrases that vote for it.  Iteration
order is significant: the category classifier resolves ties in favour of the
entry seen first, and tag suggestions are reported in table order.

The slugs must match the ``slug`` column of the blog's category and tag
records; the importer drops suggestions that have no matching record.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

CATEGORY_KEYWORDS: Mapping[str, tuple[str, ...]] = MappingProxyType(
    {
        "business": (
            "business", "entrepreneur", "company", "corporate",
            "strategy", "management", "leadership",
        ),
        "finance": (
            "finance", "money", "investment", "stock",
            "trading", "crypto", "banking", "economy",
        ),
        "saas": (
            "saas", "software", "cloud", "subscription",
            "platform", "api", "integration",
        ),
        "startups": (
            "startup", "founder", "funding", "venture",
            "seed", "pitch", "mvp", "launch",
        ),
        "ai": (
            "ai", "artificial intelligence", "machine learning", "neural",
            "chatgpt", "gpt", "llm", "automation",
        ),
        "reviews": (
            "review", "comparison", "vs", "best",
            "top", "rating", "pros", "cons",
        ),
        "technology": (
            "tech", "technology", "digital", "innovation",
            "gadget", "device", "hardware",
        ),
        "marketing": (
            "marketing", "seo", "content", "social media",
            "advertising", "campaign", "brand",
        ),
        "productivity": (
            "productivity", "efficiency", "workflow",
            "time management", "tools", "tips",
        ),
        "leadership": (
            "leadership", "management", "team",
            "culture", "motivation", "coaching",
        ),
    },
)

TAG_KEYWORDS: Mapping[str, tuple[str, ...]] = MappingProxyType(
    {
        "javascript": ("javascript", "js", "node", "react", "vue", "angular"),
        "react": ("react", "jsx", "hooks", "component"),
        "typescript": ("typescript", "ts", "type"),
        "python": ("python", "django", "flask"),
        "web-development": ("web dev", "frontend", "backend", "fullstack"),
        "mobile-apps": ("mobile", "ios", "android", "app"),
        "cloud-computing": ("cloud", "aws", "azure", "gcp"),
        "entrepreneurship": ("entrepreneur", "startup", "founder"),
        "strategy": ("strategy", "strategic", "planning"),
        "growth": ("growth", "scale", "scaling"),
        "innovation": ("innovation", "innovative", "disrupt"),
        "investing": ("invest", "portfolio", "stock"),
        "cryptocurrency": ("crypto", "bitcoin", "ethereum", "blockchain"),
        "machine-learning": ("machine learning", "ml", "model", "training"),
        "chatgpt": ("chatgpt", "gpt", "openai"),
        "automation": ("automat", "workflow", "bot"),
        "data-science": ("data science", "analytics", "big data"),
        "seo": ("seo", "search engine", "ranking"),
        "content-marketing": ("content marketing", "blog", "article"),
        "social-media": ("social media", "facebook", "twitter", "linkedin"),
        "tutorial": ("tutorial", "how to", "guide", "step by step"),
        "guide": ("guide", "handbook", "manual"),
        "tips": ("tips", "tricks", "hack"),
        "trends": ("trend", "future", "prediction"),
    },
)
