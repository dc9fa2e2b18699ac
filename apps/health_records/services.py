import logging

from django.core.exceptions import ValidationError as DjangoValidationError
from rest_framework.exceptions import NotFound, ValidationError

from apps.students.models import Student
from .models import HealthRecord
from .serializers import HealthRecordWriteSerializer

logger = logging.getLogger(__name__)


class HealthRecordService:
    """Owns HealthRecord entities; BMI is derived on read by the model"""

    ORDERING = ['-record_date', '-created_at']

    @staticmethod
    def base_queryset():
        return HealthRecord.objects.select_related('student')

    @staticmethod
    def _get_student(student_id):
        if student_id in (None, ''):
            raise ValidationError({'student_id': ['This field is required.']})
        try:
            return Student.objects.get(pk=student_id)
        except (Student.DoesNotExist, DjangoValidationError, ValueError):
            logger.warning("Health record references missing student %s", student_id)
            raise NotFound('Student not found')

    @staticmethod
    def get(record_id):
        try:
            return HealthRecordService.base_queryset().get(pk=record_id)
        except (HealthRecord.DoesNotExist, DjangoValidationError, ValueError):
            logger.warning("Health record %s not found", record_id)
            raise NotFound('Health record not found')

    @staticmethod
    def list(student_id=None, record_type=None):
        queryset = HealthRecordService.base_queryset()
        if student_id is not None:
            queryset = queryset.filter(student_id=student_id)
        if record_type is not None:
            queryset = queryset.filter(record_type=record_type)
        return queryset.order_by(*HealthRecordService.ORDERING)

    @staticmethod
    def list_by_student(student_id):
        """Records of one student, most recent record_date first."""
        student = HealthRecordService._get_student(student_id)
        return HealthRecordService.list(student_id=student.pk)

    @staticmethod
    def _ensure_mapping(data):
        if not hasattr(data, 'get'):
            raise ValidationError({'non_field_errors': ['Invalid data. Expected a dictionary.']})

    @staticmethod
    def create(data):
        HealthRecordService._ensure_mapping(data)
        student = HealthRecordService._get_student(data.get('student_id'))
        serializer = HealthRecordWriteSerializer(data=data)
        serializer.is_valid(raise_exception=True)
        record = serializer.save(student=student)
        logger.info(
            "Created %s health record %s for student %s",
            record.record_type, record.pk, student.pk,
        )
        return HealthRecordService.get(record.pk)

    @staticmethod
    def update(record_id, data):
        """
        Partial update. Moving a record to another student requires that
        student to exist; BMI is recomputed from the stored height and weight.
        """
        record = HealthRecordService.get(record_id)
        HealthRecordService._ensure_mapping(data)
        save_kwargs = {}
        new_student_id = data.get('student_id')
        if new_student_id not in (None, '') and str(new_student_id) != str(record.student_id):
            save_kwargs['student'] = HealthRecordService._get_student(new_student_id)

        serializer = HealthRecordWriteSerializer(record, data=data, partial=True)
        serializer.is_valid(raise_exception=True)
        serializer.save(**save_kwargs)
        logger.info("Updated health record %s: %s", record.pk, sorted(serializer.validated_data))
        return HealthRecordService.get(record.pk)

    @staticmethod
    def delete(record_id):
        record = HealthRecordService.get(record_id)
        record.delete()
        logger.info("Deleted health record %s of student %s", record_id, record.student_id)
