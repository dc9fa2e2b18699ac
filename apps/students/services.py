import logging

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import transaction
from django.db.models import CharField, Count, Value
from django.db.models.functions import Concat
from rest_framework.exceptions import NotFound

from .models import Student
from .serializers import StudentWriteSerializer

logger = logging.getLogger(__name__)


def filter_by_full_name(queryset, term):
    """Case-insensitive substring match over "first_name last_name"."""
    term = (term or '').strip()
    if not term:
        return queryset
    return queryset.annotate(
        search_name=Concat('first_name', Value(' '), 'last_name', output_field=CharField())
    ).filter(search_name__icontains=term)


class StudentService:
    """Owns Student entities: validation, lookups and the cascading delete"""

    DEFAULT_ORDERING = ['first_name', 'last_name']

    @staticmethod
    def base_queryset():
        return Student.objects.annotate(num_health_records=Count('health_records'))

    @staticmethod
    def get(student_id):
        try:
            return StudentService.base_queryset().get(pk=student_id)
        except (Student.DoesNotExist, DjangoValidationError, ValueError):
            logger.warning("Student %s not found", student_id)
            raise NotFound('Student not found')

    @staticmethod
    def list(search=None, grade=None, ordering=None):
        queryset = StudentService.base_queryset()
        if grade is not None:
            queryset = queryset.filter(grade=grade)
        queryset = filter_by_full_name(queryset, search)
        return queryset.order_by(*(ordering or StudentService.DEFAULT_ORDERING))

    @staticmethod
    def create(data):
        serializer = StudentWriteSerializer(data=data)
        serializer.is_valid(raise_exception=True)
        student = serializer.save()
        logger.info("Created student %s (grade %s)", student.pk, student.grade)
        return StudentService.get(student.pk)

    @staticmethod
    def update(student_id, data):
        """Partial update: fields missing from ``data`` keep their stored value."""
        student = StudentService.get(student_id)
        serializer = StudentWriteSerializer(student, data=data, partial=True)
        serializer.is_valid(raise_exception=True)
        serializer.save()
        logger.info("Updated student %s: %s", student.pk, sorted(serializer.validated_data))
        return StudentService.get(student.pk)

    @staticmethod
    @transaction.atomic
    def delete(student_id):
        """
        Delete a student and every health record that belongs to it.

        Runs in a single transaction with the student row locked, so readers
        see either the student with all of its records or neither. Returns the
        number of health records removed.
        """
        from apps.health_records.models import HealthRecord

        try:
            student = Student.objects.select_for_update().get(pk=student_id)
        except (Student.DoesNotExist, DjangoValidationError, ValueError):
            logger.warning("Student %s not found for delete", student_id)
            raise NotFound('Student not found')

        removed_records, _ = HealthRecord.objects.filter(student=student).delete()
        student.delete()

        logger.info("Deleted student %s and %s health record(s)", student_id, removed_records)
        return removed_records
