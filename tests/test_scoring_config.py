import os
import sys
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resumefit.core.config.scoring import (  # noqa: E402
    clear_scoring_config_cache,
    get_scoring_config,
    get_scoring_value,
)


class ScoringConfigTests(unittest.TestCase):
    def tearDown(self):
        clear_scoring_config_cache()

    def test_loader_and_value_lookup(self):
        config = get_scoring_config()
        self.assertIsInstance(config, dict)
        self.assertEqual(get_scoring_value("keywords.max_results"), 25)
        self.assertEqual(get_scoring_value("compatibility.experience_score"), 75)
        self.assertEqual(get_scoring_value("sections.window_chars"), 500)

    def test_missing_paths_return_default(self):
        self.assertEqual(get_scoring_value("keywords.unknown", 3), 3)
        self.assertIsNone(get_scoring_value("keywords.max_results.deeper"))
        self.assertEqual(get_scoring_value("", "fallback"), "fallback")

    def test_override_path(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "scoring.yaml"
            path.write_text("compatibility:\n  experience_score: 60\n", encoding="utf-8")
            clear_scoring_config_cache()
            with patch.dict(os.environ, {"SCORING_CONFIG_PATH": str(path)}):
                self.assertEqual(get_scoring_value("compatibility.experience_score"), 60)
                self.assertEqual(get_scoring_value("keywords.max_results", 25), 25)

    def test_bad_config_raises(self):
        with tempfile.TemporaryDirectory() as tmp:
            missing = Path(tmp) / "missing.yaml"
            not_mapping = Path(tmp) / "list.yaml"
            not_mapping.write_text("- 1\n- 2\n", encoding="utf-8")
            for path in (missing, not_mapping):
                with self.subTest(path=path.name):
                    clear_scoring_config_cache()
                    with patch.dict(os.environ, {"SCORING_CONFIG_PATH": str(path)}):
                        with self.assertRaises(RuntimeError):
                            get_scoring_config()


if __name__ == "__main__":
    unittest.main()
