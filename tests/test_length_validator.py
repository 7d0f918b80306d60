import os
import tempfile
import unittest
from dataclasses import dataclass

from field_validation import (
    LengthValidator,
    validate_record,
    validate_batch,
    validate_batch_as_messages,
    length_field,
    get_metrics,
)
from field_validation.metrics import ValidationMetrics, reset_metrics


@dataclass
class CustomerRow:
    name: str = length_field(5, label="Customer name")
    remark: str = length_field(headers=("Remark",))


class TestLengthValidator(unittest.TestCase):
    def setUp(self):
        reset_metrics()
        self.addCleanup(reset_metrics)

    def test_configured_limits_apply_by_default(self):
        validator = LengthValidator(field_limits={"Remark": 3})

        violations = validator.validate(CustomerRow("Ann", "long remark"))

        self.assertEqual([(v.label, v.limit) for v in violations], [("Remark", 3)])

    def test_call_limits_replace_configured_limits(self):
        validator = LengthValidator(field_limits={"Remark": 3})

        self.assertEqual(validator.validate(CustomerRow("Ann", "long remark"), {"remark": 20}), [])
        self.assertEqual(validator.validate(CustomerRow("Ann", "long remark"), {}), [])

    def test_limits_loaded_from_file(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, "limits.yaml")
            with open(path, "w", encoding="utf-8") as f:
                f.write("field_limits:\n  Remark: 4\n  other: 9\n")

            validator = LengthValidator(field_limits={"other": 1}, limits_path=path)

        self.assertEqual(validator.field_limits, {"Remark": 4, "other": 1})
        self.assertTrue(validator.has_violations(CustomerRow("Ann", "remark")))
        self.assertFalse(validator.has_violations(CustomerRow("Ann", "ok")))

    def test_batch_messages(self):
        validator = LengthValidator()
        rows = [CustomerRow("Alexander"), CustomerRow("Bo"), CustomerRow("Christina")]

        self.assertEqual(validator.validate_batch_as_messages(rows), [
            "Row 1 Field [Customer name] must not exceed 5 characters, current length is 9",
            "Row 3 Field [Customer name] must not exceed 5 characters, current length is 9",
        ])
        self.assertEqual(len(validator.validate_batch_flat(rows)), 2)
        self.assertEqual(validator.validate_batch(None), [])

    def test_metrics_disabled_by_default(self):
        self.assertIsNone(LengthValidator().metrics)

    def test_metrics_recorded(self):
        validator = LengthValidator(enable_metrics=True)

        validator.validate(CustomerRow("Alexander"))
        validator.validate_batch([CustomerRow("Alexander"), CustomerRow("Bo")])

        stats = validator.metrics.export_json()
        self.assertEqual(stats['records_total'], 3)
        self.assertEqual(stats['records_with_violations'], 2)
        self.assertEqual(stats['violations_total'], 2)
        self.assertEqual(stats['violations_by_label'], {"Customer name": 2})

    def test_metrics_feed_global_collector(self):
        LengthValidator(enable_metrics=True).validate(CustomerRow("Alexander"))

        self.assertEqual(get_metrics().records_total, 1)
        self.assertEqual(get_metrics().violations_total, 1)

    def test_has_violations_records_metrics(self):
        validator = LengthValidator(enable_metrics=True)

        self.assertTrue(validator.has_violations(CustomerRow("Alexander")))
        self.assertFalse(validator.has_violations(CustomerRow("Bo")))

        self.assertEqual(get_metrics().records_total, 2)
        self.assertEqual(get_metrics().records_with_violations, 1)


class TestModuleFunctions(unittest.TestCase):
    def test_validate_record(self):
        self.assertEqual(len(validate_record(CustomerRow("Alexander"))), 1)
        self.assertEqual(validate_record(CustomerRow("Ann", "x" * 40), {"Remark": 50}), [])

    def test_validate_batch(self):
        rows = validate_batch([CustomerRow("Bo"), CustomerRow("Ann", "abcd")], {"remark": 2})
        self.assertEqual([(r.row_index, r.label) for r in rows], [(2, "Remark")])

    def test_validate_batch_as_messages(self):
        self.assertEqual(validate_batch_as_messages([]), [])
        self.assertEqual(
            validate_batch_as_messages([CustomerRow("Alexander")]),
            ["Row 1 Field [Customer name] must not exceed 5 characters, current length is 9"]
        )


class TestValidationMetrics(unittest.TestCase):
    def setUp(self):
        self.metrics = ValidationMetrics()

    def test_export_text(self):
        validator = LengthValidator()
        rows = validator.validate_batch([CustomerRow("Alexander"), CustomerRow('Quote"d name')])
        self.metrics.record_batch(2, rows, duration_seconds=0.0002)

        text = self.metrics.export_text()

        self.assertIn("fieldlength_records_total 2", text)
        self.assertIn("fieldlength_records_with_violations 2", text)
        self.assertIn('fieldlength_violations_total{label="Customer name"} 2', text)
        self.assertIn('fieldlength_validation_duration_seconds_bucket{le="0.0005"} 1', text)
        self.assertIn('fieldlength_validation_duration_seconds_bucket{le="0.0001"} 0', text)
        self.assertIn("fieldlength_validation_duration_seconds_count 1", text)

    def test_reset(self):
        self.metrics.record_record([], duration_seconds=0.01)
        self.metrics.reset()

        stats = self.metrics.export_json()
        self.assertEqual(stats['records_total'], 0)
        self.assertEqual(stats['violation_rate'], 0)

    def test_global_metrics_reset(self):
        self.addCleanup(reset_metrics)
        self.assertIs(get_metrics(), get_metrics())
        get_metrics().record_record([])
        reset_metrics()
        self.assertEqual(get_metrics().records_total, 0)


if __name__ == '__main__':
    unittest.main()
