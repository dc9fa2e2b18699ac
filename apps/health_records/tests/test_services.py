import uuid
from datetime import date

from django.test import TestCase
from django.utils import timezone
from rest_framework.exceptions import NotFound, ValidationError

from apps.health_records.models import HealthRecord
from apps.health_records.services import HealthRecordService
from apps.students.tests.utils import make_record, make_student


class HealthRecordCreateTests(TestCase):
    def setUp(self):
        self.student = make_student()

    def payload(self, **overrides):
        data = {
            "student_id": str(self.student.pk),
            "record_date": "2024-03-10",
            "record_type": "Annual Physical",
        }
        data.update(overrides)
        return data

    def test_bmi_is_derived_on_every_read(self):
        record = HealthRecordService.create(self.payload(height=160, weight=50))

        self.assertEqual(record.bmi, 19.5)
        for _ in range(3):
            self.assertEqual(HealthRecordService.get(record.pk).bmi, 19.5)
        self.assertEqual(HealthRecordService.get(record.pk).bmi_category, "Normal")

    def test_unknown_student(self):
        with self.assertRaises(NotFound):
            HealthRecordService.create(self.payload(student_id=str(uuid.uuid4())))
        self.assertEqual(HealthRecord.objects.count(), 0)

    def test_malformed_student_id(self):
        with self.assertRaises(NotFound):
            HealthRecordService.create(self.payload(student_id="abc"))
        self.assertEqual(HealthRecord.objects.count(), 0)

    def test_missing_student_id(self):
        payload = self.payload()
        payload.pop("student_id")
        with self.assertRaises(ValidationError) as ctx:
            HealthRecordService.create(payload)
        self.assertIn("student_id", ctx.exception.detail)

    def test_invalid_record_type(self):
        with self.assertRaises(ValidationError) as ctx:
            HealthRecordService.create(self.payload(record_type="Checkup"))
        self.assertIn("record_type", ctx.exception.detail)
        self.assertEqual(HealthRecord.objects.count(), 0)

    def test_numeric_ranges(self):
        cases = [
            ("height", 300.5), ("height", -1),
            ("weight", 501), ("weight", -0.5),
            ("temperature", 29.9), ("temperature", 45.1), ("temperature", 98.6),
        ]
        for field, value in cases:
            with self.subTest(field=field, value=value):
                with self.assertRaises(ValidationError) as ctx:
                    HealthRecordService.create(self.payload(**{field: value}))
                self.assertIn(field, ctx.exception.detail)
        self.assertEqual(HealthRecord.objects.count(), 0)

    def test_range_limits_are_inclusive(self):
        record = HealthRecordService.create(self.payload(height=300, weight=500, temperature=45))
        self.assertEqual(record.temperature, 45)

    def test_blank_measurements_are_stored_as_null(self):
        record = HealthRecordService.create(
            self.payload(height="", weight=" ", temperature="", next_appointment="")
        )

        record.refresh_from_db()
        self.assertIsNone(record.height)
        self.assertIsNone(record.weight)
        self.assertIsNone(record.next_appointment)
        self.assertIsNone(record.bmi)
        self.assertIsNone(record.bmi_category)

    def test_numeric_strings_are_stored_as_numbers(self):
        record = HealthRecordService.create(self.payload(height="175", weight="70"))

        record.refresh_from_db()
        self.assertEqual(record.height, 175.0)
        self.assertIsInstance(record.weight, float)
        self.assertEqual(record.bmi, 22.9)

    def test_record_date_defaults_to_today(self):
        payload = self.payload()
        payload.pop("record_date")
        record = HealthRecordService.create(payload)
        self.assertEqual(record.record_date, timezone.localdate())

    def test_client_bmi_is_ignored(self):
        record = HealthRecordService.create(self.payload(height=160, weight=50, bmi=99.9))
        self.assertEqual(HealthRecordService.get(record.pk).bmi, 19.5)


class HealthRecordReadTests(TestCase):
    def setUp(self):
        self.student = make_student()

    def test_get_missing(self):
        with self.assertRaises(NotFound):
            HealthRecordService.get(uuid.uuid4())

    def test_list_by_student_orders_by_record_date_desc(self):
        for day in [date(2024, 1, 1), date(2024, 3, 1), date(2024, 2, 1)]:
            make_record(self.student, record_date=day)
        make_record(make_student(first_name="Other"), record_date=date(2024, 12, 1))

        dates = [r.record_date for r in HealthRecordService.list_by_student(self.student.pk)]
        self.assertEqual(dates, [date(2024, 3, 1), date(2024, 2, 1), date(2024, 1, 1)])

    def test_list_by_unknown_student(self):
        with self.assertRaises(NotFound):
            HealthRecordService.list_by_student(uuid.uuid4())

    def test_list_by_student_without_records(self):
        self.assertEqual(list(HealthRecordService.list_by_student(self.student.pk)), [])


class HealthRecordUpdateDeleteTests(TestCase):
    def setUp(self):
        self.student = make_student(first_name="Ava")
        self.record = make_record(self.student, height=160, weight=50, medical_notes="ok")

    def test_partial_update_recomputes_bmi(self):
        updated = HealthRecordService.update(self.record.pk, {"weight": 64, "bmi": 10})

        self.assertEqual(updated.weight, 64)
        self.assertEqual(updated.height, 160)
        self.assertEqual(updated.medical_notes, "ok")
        self.assertEqual(updated.bmi, 25.0)
        self.assertEqual(updated.bmi_category, "Overweight")

    def test_clearing_height_clears_bmi(self):
        updated = HealthRecordService.update(self.record.pk, {"height": ""})
        self.assertIsNone(updated.height)
        self.assertIsNone(updated.bmi)

    def test_move_to_existing_student(self):
        other = make_student(first_name="Ben")
        updated = HealthRecordService.update(self.record.pk, {"student_id": str(other.pk)})
        self.assertEqual(updated.student_id, other.pk)

    def test_move_to_unknown_student(self):
        with self.assertRaises(NotFound):
            HealthRecordService.update(self.record.pk, {"student_id": str(uuid.uuid4())})
        self.record.refresh_from_db()
        self.assertEqual(self.record.student_id, self.student.pk)

    def test_same_student_id_is_accepted(self):
        updated = HealthRecordService.update(
            self.record.pk, {"student_id": str(self.student.pk), "record_type": "Dental"}
        )
        self.assertEqual(updated.record_type, "Dental")

    def test_update_invalid_values(self):
        with self.assertRaises(ValidationError):
            HealthRecordService.update(self.record.pk, {"temperature": 50})

    def test_update_missing(self):
        with self.assertRaises(NotFound):
            HealthRecordService.update(uuid.uuid4(), {"weight": 40})

    def test_delete_keeps_student(self):
        HealthRecordService.delete(self.record.pk)

        self.assertFalse(HealthRecord.objects.filter(pk=self.record.pk).exists())
        self.student.refresh_from_db()
        self.assertEqual(self.student.first_name, "Ava")

    def test_delete_missing(self):
        with self.assertRaises(NotFound):
            HealthRecordService.delete(uuid.uuid4())
