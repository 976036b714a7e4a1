import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resumefit.features.skill_classifier import classify_skills  # noqa: E402


def _names(skills):
    return [skill.name for skill in skills]


class SkillClassifierTests(unittest.TestCase):
    def test_required_and_preferred_sections(self):
        result = classify_skills(
            "Required: React, TypeScript. Preferred: AWS. This is a senior remote role at a startup."
        )
        self.assertEqual(_names(result.required_skills), ["react", "typescript"])
        self.assertEqual(_names(result.preferred_skills), ["aws"])
        for skill in result.required_skills:
            self.assertEqual(skill.importance, "required")
            self.assertEqual(skill.category, "technical")
            self.assertIsNone(skill.years_experience)
            self.assertIsNone(skill.proficiency_level)
        self.assertEqual(result.preferred_skills[0].importance, "preferred")

    def test_skill_in_both_sections_is_required(self):
        result = classify_skills("Must have: Python and Docker. Bonus: Docker, Kubernetes.")
        self.assertEqual(_names(result.required_skills), ["python", "docker"])
        self.assertEqual(_names(result.preferred_skills), ["kubernetes"])

    def test_without_triggers_every_skill_is_required(self):
        result = classify_skills("We use Python and Go daily.")
        self.assertEqual(_names(result.required_skills), ["python", "go"])
        self.assertEqual(list(result.preferred_skills), [])

    def test_required_window_is_limited(self):
        result = classify_skills("Required: " + "x" * 600 + " python")
        self.assertEqual(list(result.required_skills), [])
        self.assertEqual(_names(result.preferred_skills), ["python"])

    def test_empty_text(self):
        result = classify_skills("")
        self.assertEqual(list(result.required_skills), [])
        self.assertEqual(list(result.preferred_skills), [])


if __name__ == "__main__":
    unittest.main()
