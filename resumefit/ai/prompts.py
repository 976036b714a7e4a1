from __future__ import annotations

SYSTEM_PROMPT = (
    "You are a recruiting analyst. Read a job posting and describe it as structured data. "
    "Return strict JSON only, no prose and no markdown."
)

_SHAPE = """{
  "keywords": [
    {"keyword": "string", "weight": 0.8, "category": "technical|soft|industry|role|company",
     "frequency": 3, "context": ["sentence where it appears"], "synonyms": ["related term"]}
  ],
  "requiredSkills": [
    {"name": "skill", "category": "technical|soft|industry|certification",
     "importance": "required|preferred|nice-to-have", "yearsExperience": 3,
     "proficiencyLevel": "beginner|intermediate|advanced|expert"}
  ],
  "preferredSkills": [],
  "experienceLevel": "entry|junior|mid|senior|lead|executive",
  "industryContext": "short industry description",
  "companySize": "startup|small|medium|large|enterprise",
  "roleType": "individual-contributor|team-lead|manager|director|executive",
  "workArrangement": "remote|hybrid|onsite|flexible",
  "salaryRange": {"min": 0, "max": 0, "currency": "USD"},
  "benefits": [],
  "responsibilities": [],
  "qualifications": [],
  "niceToHave": [],
  "redFlags": [],
  "matchingTips": []
}"""


def build_job_analysis_prompt(job_description: str, max_chars: int = 14000) -> str:
    return (
        "Analyze this job description and return a JSON object with exactly this structure:\n"
        f"{_SHAPE}\n\n"
        f"Job description:\n{job_description[:max_chars]}\n\n"
        "Guidance:\n"
        "- list every technical skill, tool and technology mentioned\n"
        "- include soft skills and leadership expectations\n"
        "- infer experience level from years mentioned or seniority wording\n"
        "- separate hard requirements from preferences\n"
        "- flag unrealistic expectations, missing pay, or vague scope as red flags\n"
        "- give concrete tips for tailoring a resume to this role\n"
        "- omit salaryRange when the posting states no pay"
    )
