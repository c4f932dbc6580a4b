from __future__ import annotations

DEFAULT_TARGET_ROLE = "General professional roles"

SCAN_PREFIX = "Analyze this resume and give professional feedback:"
REWRITE_PREFIX = "Rewrite this resume professionally and ATS-friendly:"


def scan_prompt(resume_text: str) -> str:
    return f"{SCAN_PREFIX}\n{resume_text}"


def rewrite_prompt(resume_text: str) -> str:
    return f"{REWRITE_PREFIX}\n{resume_text}"


def job_match_prompt(resume_text: str, target_role: str | None = None) -> str:
    role = target_role or DEFAULT_TARGET_ROLE
    return f"""
Compare this resume to the target role.

Return:
- Match percentage
- Strengths
- Skill gaps
- Improvement advice

Resume:
{resume_text}

Target Role:
{role}
"""
