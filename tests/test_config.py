import json
import tempfile
import unittest
from pathlib import Path

from chembalancer.config import BatchConfig, RenderOptions, load_config, parse_config


class TestConfig(unittest.TestCase):
    def test_defaults(self):
        config = parse_config({"equations": ["H2 + O2 = H2O"]})
        self.assertEqual(config, BatchConfig(equations=("H2 + O2 = H2O",)))
        self.assertEqual(config.render, RenderOptions())

    def test_render_section(self):
        config = parse_config(
            {"equations": ["A = A"], "render": {"arrow": "=", "unicode_minus": False}}
        )
        self.assertEqual(config.render.arrow, "=")
        self.assertFalse(config.render.unicode_minus)
        self.assertFalse(config.render.show_ones)

    def test_invalid(self):
        with self.assertRaises(ValueError):
            parse_config({})
        with self.assertRaises(ValueError):
            parse_config({"equations": []})
        with self.assertRaises(ValueError):
            parse_config({"equations": [1]})
        with self.assertRaises(ValueError):
            parse_config({"equations": ["A = A"], "render": {"colour": "red"}})

    def test_flags_must_be_booleans(self):
        with self.assertRaises(ValueError):
            parse_config({"equations": ["H = H"], "render": {"unicode_minus": "false"}})
        with self.assertRaises(ValueError):
            parse_config({"equations": ["H = H"], "render": {"show_ones": 1}})
        with self.assertRaises(ValueError):
            parse_config({"equations": ["H = H"], "render": {"arrow": 5}})

    def test_load_from_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "batch.json"
            path.write_text(json.dumps({"equations": ["Fe + O2 = Fe2O3"]}), encoding="utf-8")
            config = load_config(path)
        self.assertEqual(config.equations, ("Fe + O2 = Fe2O3",))


if __name__ == '__main__':
    unittest.main()
