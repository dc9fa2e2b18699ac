from datetime import date

from django.contrib.auth.models import User
from django.core.management.base import BaseCommand
from django.db import transaction

from apps.health_records.models import HealthRecord
from apps.students.models import Student

SAMPLE_STUDENTS = [
    {
        "first_name": "John", "last_name": "Doe", "date_of_birth": date(2010, 5, 15),
        "gender": "Male", "grade": 5, "blood_type": "O+",
        "father_name": "Robert Doe", "mother_name": "Mary Doe", "contact_number": "555-0101",
        "records": [
            {
                "record_date": date(2024, 1, 15), "record_type": "Annual Physical",
                "height": 145.5, "weight": 40.2, "blood_pressure": "110/70", "temperature": 36.6,
                "allergies": "Peanuts", "medical_notes": "Healthy child, regular development",
            },
        ],
    },
    {
        "first_name": "Alice", "last_name": "Smith", "date_of_birth": date(2011, 3, 20),
        "gender": "Female", "grade": 4, "blood_type": "A+",
        "father_name": "David Smith", "mother_name": "Linda Smith", "contact_number": "555-0102",
        "records": [
            {
                "record_date": date(2024, 1, 16), "record_type": "Annual Physical",
                "height": 138.0, "weight": 32.5, "blood_pressure": "105/68", "temperature": 36.8,
            },
            {
                "record_date": date(2024, 2, 2), "record_type": "Vaccination",
                "medications": "Influenza vaccine", "treatment_plan": "Observe for 15 minutes",
            },
        ],
    },
    {
        "first_name": "Michael", "last_name": "Johnson", "date_of_birth": date(2010, 8, 10),
        "gender": "Male", "grade": 5, "blood_type": "B+",
        "father_name": "James Johnson", "mother_name": "Patricia Johnson", "contact_number": "555-0103",
        "records": [
            {
                "record_date": date(2024, 1, 17), "record_type": "Illness",
                "height": 150.2, "weight": 45.8, "temperature": 38.1,
                "medical_notes": "Seasonal flu", "treatment_plan": "Rest and fluids",
                "next_appointment": date(2024, 1, 24),
            },
        ],
    },
]


class Command(BaseCommand):
    help = "Create the default admin user and sample students. Safe to run repeatedly."

    def add_arguments(self, parser):
        parser.add_argument("--admin-username", default="admin")
        parser.add_argument("--admin-password", default="admin123")

    @transaction.atomic
    def handle(self, *args, **options):
        username = options["admin_username"]
        if User.objects.filter(username=username).exists():
            self.stdout.write(f"[skip] user {username} already exists")
        else:
            User.objects.create_superuser(username=username, email="", password=options["admin_password"])
            self.stdout.write(self.style.SUCCESS(f"[created] user {username}"))

        if Student.objects.exists():
            self.stdout.write("[skip] students already present, sample data not loaded")
            return

        for item in SAMPLE_STUDENTS:
            fields = {key: value for key, value in item.items() if key != "records"}
            student = Student.objects.create(**fields)
            for record in item["records"]:
                HealthRecord.objects.create(student=student, **record)
            self.stdout.write(
                self.style.SUCCESS(
                    f"[created] {student.full_name} with {len(item['records'])} health record(s)"
                )
            )
