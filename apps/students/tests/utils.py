from datetime import date

from django.contrib.auth.models import User

from apps.health_records.models import HealthRecord
from apps.students.models import Student


def make_student(**overrides):
    fields = {
        "first_name": "Test",
        "last_name": "Student",
        "date_of_birth": date(2012, 4, 1),
        "gender": "Female",
        "grade": 3,
    }
    fields.update(overrides)
    return Student.objects.create(**fields)


def make_record(student, **overrides):
    fields = {
        "record_type": "Annual Physical",
        "record_date": date(2024, 1, 15),
    }
    fields.update(overrides)
    return HealthRecord.objects.create(student=student, **fields)


def make_user(username="nurse", password="s3cret-pass-123"):
    return User.objects.create_user(username=username, password=password)
