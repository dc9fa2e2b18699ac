from rest_framework import serializers

from .models import HealthRecord


class BlankAsNullMixin:
    """Forms submit empty inputs as ''; store those as NULL instead."""

    def validate_empty_values(self, data):
        if isinstance(data, str) and not data.strip():
            data = None
        return super().validate_empty_values(data)


class OptionalFloatField(BlankAsNullMixin, serializers.FloatField):
    pass


class OptionalDateField(BlankAsNullMixin, serializers.DateField):
    pass


class HealthRecordSerializer(serializers.ModelSerializer):
    student_id = serializers.UUIDField(read_only=True)
    student_name = serializers.CharField(source='student.full_name', read_only=True)
    bmi = serializers.SerializerMethodField()
    bmi_category = serializers.SerializerMethodField()
    days_since_record = serializers.IntegerField(read_only=True)
    days_until_next_appointment = serializers.IntegerField(read_only=True, allow_null=True)
    follow_up_required = serializers.BooleanField(read_only=True)

    class Meta:
        model = HealthRecord
        fields = [
            'id', 'student_id', 'student_name', 'record_date', 'record_type',
            'height', 'weight', 'bmi', 'bmi_category', 'blood_pressure', 'temperature',
            'allergies', 'medications', 'medical_notes', 'treatment_plan',
            'next_appointment', 'days_since_record', 'days_until_next_appointment',
            'follow_up_required', 'created_at', 'updated_at',
        ]
        read_only_fields = fields

    def get_bmi(self, obj):
        return obj.bmi

    def get_bmi_category(self, obj):
        return obj.bmi_category


class HealthRecordWriteSerializer(serializers.ModelSerializer):
    """
    Validates create and update payloads.

    The owning student is resolved by the service layer, and ``bmi`` is not a
    field here so a client-supplied value never reaches the database.
    """
    record_type = serializers.ChoiceField(
        choices=HealthRecord.RECORD_TYPE_CHOICES,
        error_messages={
            'invalid_choice': '"{input}" is not a valid record type. Valid types: '
                              + ', '.join(choice for choice, _ in HealthRecord.RECORD_TYPE_CHOICES) + '.',
        },
    )
    height = OptionalFloatField(
        required=False, allow_null=True,
        min_value=HealthRecord.MIN_HEIGHT_CM, max_value=HealthRecord.MAX_HEIGHT_CM,
        help_text='Height in centimeters',
    )
    weight = OptionalFloatField(
        required=False, allow_null=True,
        min_value=HealthRecord.MIN_WEIGHT_KG, max_value=HealthRecord.MAX_WEIGHT_KG,
        help_text='Weight in kilograms',
    )
    temperature = OptionalFloatField(
        required=False, allow_null=True,
        min_value=HealthRecord.MIN_TEMPERATURE_C, max_value=HealthRecord.MAX_TEMPERATURE_C,
        help_text='Body temperature in Celsius',
    )
    next_appointment = OptionalDateField(required=False, allow_null=True)

    class Meta:
        model = HealthRecord
        fields = [
            'record_date', 'record_type', 'height', 'weight', 'blood_pressure',
            'temperature', 'allergies', 'medications', 'medical_notes',
            'treatment_plan', 'next_appointment',
        ]
