from django.utils import timezone
from rest_framework import serializers

from .models import Student


class NormalizedChoiceField(serializers.ChoiceField):
    """ChoiceField that runs a normalizer over string input before the choice check."""

    def __init__(self, *args, normalizer=None, **kwargs):
        self.normalizer = normalizer
        super().__init__(*args, **kwargs)

    def to_internal_value(self, data):
        if self.normalizer is not None and isinstance(data, str) and data != '':
            data = self.normalizer(data)
        return super().to_internal_value(data)


def _normalize_blood_type(value):
    return value.strip().upper()


class StudentSerializer(serializers.ModelSerializer):
    full_name = serializers.CharField(read_only=True)
    age = serializers.IntegerField(read_only=True)
    health_record_count = serializers.SerializerMethodField()

    class Meta:
        model = Student
        fields = '__all__'
        read_only_fields = ['id', 'created_at', 'updated_at']

    def get_health_record_count(self, obj):
        annotated = getattr(obj, 'num_health_records', None)
        if annotated is not None:
            return annotated
        return obj.health_records.count()


class StudentWriteSerializer(serializers.ModelSerializer):
    """Validates create and update payloads for students"""
    gender = NormalizedChoiceField(
        choices=Student.GENDER_CHOICES,
        normalizer=Student.normalize_gender,
        error_messages={
            'invalid_choice': "Gender must be either 'Male', 'Female', or 'Other'.",
        },
    )
    blood_type = NormalizedChoiceField(
        choices=Student.BLOOD_TYPE_CHOICES,
        normalizer=_normalize_blood_type,
        required=False,
        allow_null=True,
        allow_blank=True,
    )

    class Meta:
        model = Student
        fields = [
            'first_name', 'last_name', 'date_of_birth', 'gender', 'grade',
            'blood_type', 'father_name', 'mother_name', 'contact_number', 'address',
        ]

    def validate_date_of_birth(self, value):
        if value > timezone.localdate():
            raise serializers.ValidationError("Date of birth cannot be in the future.")
        return value

    def validate_blood_type(self, value):
        return value or None
