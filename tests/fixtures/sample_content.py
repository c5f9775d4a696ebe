"""
Template and sample content records shared by unit and API tests.

Builders return fresh dicts so tests can mutate them freely:
- make_template(): resume template with a summary/experience/skills layout
- make_sample(): one sample content snippet
- SAMPLE_LIBRARY: a small mixed library across industries and levels
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List

from datacv.common.repositories.sample_content_repository import SEARCH_TEXT_FIELD, build_search_text

BASE_TIME = datetime(2026, 1, 15, 12, 0, 0, tzinfo=timezone.utc)

RESUME_SECTIONS: List[Dict[str, Any]] = [
    {"id": "s1", "type": "personal_info", "name": "Contact", "order": 1},
    {"id": "s2", "type": "summary", "name": "Summary", "order": 2},
    {"id": "s3", "type": "experience", "name": "Experience", "order": 3},
    {"id": "s4", "type": "skills", "name": "Skills", "order": 4},
]


def make_template(**overrides: Any) -> Dict[str, Any]:
    """Active, public resume template for mid-level engineers."""
    template: Dict[str, Any] = {
        "id": "tpl-resume-1",
        "name": "Modern Engineer",
        "description": "Clean single-column resume",
        "category": "professional",
        "document_type": "resume",
        "is_active": True,
        "is_public": True,
        "is_premium": False,
        "usage_count": 10,
        "avg_rating": 4.5,
        "target_specialization": ["backend"],
        "target_industries": ["tech"],
        "target_experience_level": "mid",
        "template_structure": {"sections": [dict(s) for s in RESUME_SECTIONS]},
        "specific_sample_content_map": {},
    }
    template.update(overrides)
    return template


def make_sample(sample_id: str, content_type: str, content: Any, **overrides: Any) -> Dict[str, Any]:
    """Sample content snippet targeting mid-level tech/backend by default."""
    sample: Dict[str, Any] = {
        "id": sample_id,
        "content_type": content_type,
        "content": content,
        "target_industry": ["tech"],
        "target_specialization": ["backend"],
        "experience_level": "mid",
        "tags": [],
        "title": f"{content_type} sample {sample_id}",
        "description": None,
        "is_active": True,
        "created_at": BASE_TIME,
        "updated_at": BASE_TIME,
    }
    sample.update(overrides)
    return sample


def sample_library() -> List[Dict[str, Any]]:
    """
    Mixed library as stored by the repository (with search_text);
    created_at increases with list position.
    """
    samples = [
        make_sample(
            "pi-1",
            "personal_info",
            {"first_name": "Ada", "last_name": "Lovelace", "email": "ada@example.com"},
        ),
        make_sample("sum-1", "summary", "Backend engineer focused on reliable APIs."),
        make_sample("sum-2", "summary", "Finance-minded engineer.", target_industry=["finance"]),
        make_sample("exp-1", "experience", {"company": "Acme", "position": "Engineer"}, tags=["python"]),
        make_sample("exp-2", "experience", {"company": "Globex", "position": "Developer"}, tags=["python", "aws"]),
        make_sample("exp-3", "experience", {"company": "Initech", "position": "Lead"}, experience_level="senior"),
        make_sample("skill-1", "skills", {"name": "Python", "level": "expert"}),
        make_sample("proj-1", "projects", {"name": "Payments API"}, target_specialization=["payments"]),
    ]
    for offset, sample in enumerate(samples):
        sample["created_at"] = BASE_TIME + timedelta(minutes=offset)
        sample["updated_at"] = sample["created_at"]
        sample[SEARCH_TEXT_FIELD] = build_search_text(sample)
    return samples
