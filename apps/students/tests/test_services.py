from datetime import date, timedelta
from unittest.mock import patch

from django.db import DatabaseError
from django.test import TestCase
from rest_framework.exceptions import NotFound, ValidationError

from apps.health_records.models import HealthRecord
from apps.health_records.services import HealthRecordService
from apps.students.models import Student
from apps.students.services import StudentService
from .utils import make_record, make_student


class StudentCreateTests(TestCase):
    def setUp(self):
        self.payload = {
            "first_name": "Maria",
            "last_name": "Lopez",
            "date_of_birth": "2013-09-02",
            "gender": "female",
            "grade": "4",
        }

    def test_create_normalizes_gender_and_grade(self):
        student = StudentService.create(self.payload)

        student.refresh_from_db()
        self.assertEqual(student.gender, "Female")
        self.assertEqual(student.grade, 4)
        self.assertIsInstance(student.grade, int)
        self.assertIsNotNone(student.id)

    def test_gender_is_case_insensitive(self):
        for raw, expected in [("MALE", "Male"), ("oTHER", "Other"), (" Female ", "Female")]:
            self.payload["gender"] = raw
            self.assertEqual(StudentService.create(self.payload).gender, expected)

    def test_invalid_gender(self):
        self.payload["gender"] = "unknown"
        with self.assertRaises(ValidationError) as ctx:
            StudentService.create(self.payload)
        self.assertIn("gender", ctx.exception.detail)
        self.assertFalse(Student.objects.exists())

    def test_missing_required_fields(self):
        for field in ["first_name", "last_name", "date_of_birth", "gender", "grade"]:
            payload = dict(self.payload)
            payload.pop(field)
            with self.assertRaises(ValidationError) as ctx:
                StudentService.create(payload)
            self.assertIn(field, ctx.exception.detail)

    def test_blank_name_is_rejected(self):
        self.payload["first_name"] = "   "
        with self.assertRaises(ValidationError) as ctx:
            StudentService.create(self.payload)
        self.assertIn("first_name", ctx.exception.detail)

    def test_grade_range(self):
        self.payload["grade"] = 0
        self.assertEqual(StudentService.create(self.payload).grade, 0)

        self.payload["grade"] = 13
        with self.assertRaises(ValidationError) as ctx:
            StudentService.create(self.payload)
        self.assertIn("grade", ctx.exception.detail)

    def test_date_of_birth_in_future(self):
        self.payload["date_of_birth"] = (date.today() + timedelta(days=2)).isoformat()
        with self.assertRaises(ValidationError) as ctx:
            StudentService.create(self.payload)
        self.assertIn("date_of_birth", ctx.exception.detail)

    def test_invalid_date_of_birth(self):
        self.payload["date_of_birth"] = "2013-02-30"
        with self.assertRaises(ValidationError):
            StudentService.create(self.payload)

    def test_blood_type(self):
        self.payload["blood_type"] = "ab-"
        self.assertEqual(StudentService.create(self.payload).blood_type, "AB-")

        self.payload["blood_type"] = ""
        self.assertIsNone(StudentService.create(self.payload).blood_type)

        self.payload["blood_type"] = "C+"
        with self.assertRaises(ValidationError):
            StudentService.create(self.payload)


class StudentLookupTests(TestCase):
    def test_get_missing(self):
        with self.assertRaises(NotFound):
            StudentService.get("00000000-0000-0000-0000-000000000000")

    def test_get_malformed_id(self):
        with self.assertRaises(NotFound):
            StudentService.get("not-a-uuid")

    def test_list_default_ordering(self):
        make_student(first_name="Zoe", last_name="Adams")
        make_student(first_name="Anna", last_name="Brown")
        make_student(first_name="Anna", last_name="Adams")

        names = [s.full_name for s in StudentService.list()]
        self.assertEqual(names, ["Anna Adams", "Anna Brown", "Zoe Adams"])

    def test_list_search_over_full_name(self):
        make_student(first_name="Anna", last_name="Brown")
        make_student(first_name="Brownie", last_name="Smith")
        make_student(first_name="Carl", last_name="Jones")

        names = [s.full_name for s in StudentService.list(search="NA BRO")]
        self.assertEqual(names, ["Anna Brown"])

        names = [s.full_name for s in StudentService.list(search="brown")]
        self.assertEqual(names, ["Anna Brown", "Brownie Smith"])

    def test_list_by_grade(self):
        make_student(first_name="A", grade=2)
        make_student(first_name="B", grade=5)
        self.assertEqual([s.first_name for s in StudentService.list(grade=5)], ["B"])


class StudentUpdateTests(TestCase):
    def setUp(self):
        self.student = make_student(first_name="Liam", last_name="Ng", grade=3, father_name="Tom Ng")

    def test_partial_update_keeps_other_fields(self):
        updated = StudentService.update(self.student.pk, {"grade": "6"})

        self.assertEqual(updated.grade, 6)
        self.assertEqual(updated.first_name, "Liam")
        self.assertEqual(updated.father_name, "Tom Ng")

    def test_update_normalizes_gender(self):
        self.assertEqual(StudentService.update(self.student.pk, {"gender": "male"}).gender, "Male")

    def test_update_invalid_gender(self):
        with self.assertRaises(ValidationError):
            StudentService.update(self.student.pk, {"gender": "robot"})
        self.student.refresh_from_db()
        self.assertEqual(self.student.gender, "Female")

    def test_update_missing(self):
        with self.assertRaises(NotFound):
            StudentService.update("00000000-0000-0000-0000-000000000000", {"grade": 2})


class StudentCascadeDeleteTests(TestCase):
    def setUp(self):
        self.student = make_student(first_name="Ava")
        self.other = make_student(first_name="Ben")
        for day in (1, 2, 3):
            make_record(self.student, record_date=date(2024, 1, day))
        self.kept = make_record(self.other)

    def test_delete_removes_only_own_records(self):
        removed = StudentService.delete(self.student.pk)

        self.assertEqual(removed, 3)
        self.assertFalse(Student.objects.filter(pk=self.student.pk).exists())
        self.assertFalse(HealthRecord.objects.filter(student_id=self.student.pk).exists())
        self.assertEqual(list(HealthRecord.objects.values_list("pk", flat=True)), [self.kept.pk])
        self.assertTrue(Student.objects.filter(pk=self.other.pk).exists())

    def test_records_of_deleted_student_are_not_found(self):
        StudentService.delete(self.student.pk)
        with self.assertRaises(NotFound):
            HealthRecordService.list_by_student(self.student.pk)

    def test_delete_missing(self):
        with self.assertRaises(NotFound):
            StudentService.delete("00000000-0000-0000-0000-000000000000")
        self.assertEqual(HealthRecord.objects.count(), 4)

    def test_failed_delete_leaves_everything_in_place(self):
        """If removing the student fails, the record cleanup is rolled back too."""
        with patch.object(Student, "delete", side_effect=DatabaseError("connection lost")):
            with self.assertRaises(DatabaseError):
                StudentService.delete(self.student.pk)

        self.assertTrue(Student.objects.filter(pk=self.student.pk).exists())
        self.assertEqual(HealthRecord.objects.filter(student_id=self.student.pk).count(), 3)
