import os
import tempfile
import unittest
from unittest.mock import patch

from field_validation.config import (
    FieldLimitsConfig,
    parse_field_limits,
    load_field_limits,
    load_field_limits_from_env,
    FIELD_LIMITS_PATH_ENV,
)
from field_validation.errors import ConfigurationError


class TestLoadFieldLimits(unittest.TestCase):
    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmpdir.cleanup)

    def write_config(self, content, name="limits.yaml"):
        path = os.path.join(self.tmpdir.name, name)
        with open(path, "w", encoding="utf-8") as f:
            f.write(content)
        return path

    def test_loads_limits(self):
        path = self.write_config(
            'version: "2024-06"\n'
            'field_limits:\n'
            '  remark: 200\n'
            '  Customer Name: 50\n'
        )

        self.assertEqual(load_field_limits(path), {"remark": 200, "Customer Name": 50})

    def test_empty_file_gives_no_limits(self):
        self.assertEqual(load_field_limits(self.write_config("")), {})

    def test_missing_file(self):
        with self.assertRaises(ConfigurationError) as ctx:
            load_field_limits(os.path.join(self.tmpdir.name, "missing.yaml"))
        self.assertIn("not found", str(ctx.exception))

    def test_malformed_yaml(self):
        path = self.write_config("field_limits: [unclosed\n")
        with self.assertRaises(ConfigurationError):
            load_field_limits(path)

    def test_non_positive_limit_rejected(self):
        path = self.write_config("field_limits:\n  remark: 0\n")
        with self.assertRaises(ConfigurationError) as ctx:
            load_field_limits(path)
        self.assertIn("remark", str(ctx.exception))

    def test_non_integer_limit_rejected(self):
        path = self.write_config('field_limits:\n  remark: "ten"\n')
        with self.assertRaises(ConfigurationError):
            load_field_limits(path)

    def test_document_must_be_mapping(self):
        with self.assertRaises(ConfigurationError):
            parse_field_limits(["remark", 3])

    def test_parse_defaults(self):
        config = parse_field_limits(None)
        self.assertIsInstance(config, FieldLimitsConfig)
        self.assertEqual(config.version, "unknown")
        self.assertEqual(config.field_limits, {})

    def test_load_from_env(self):
        path = self.write_config("field_limits:\n  title: 12\n")
        with patch.dict('os.environ', {FIELD_LIMITS_PATH_ENV: path}):
            self.assertEqual(load_field_limits_from_env(), {"title": 12})

    def test_load_from_env_unset(self):
        with patch.dict('os.environ', {}, clear=True):
            self.assertEqual(load_field_limits_from_env(), {})


if __name__ == '__main__':
    unittest.main()
