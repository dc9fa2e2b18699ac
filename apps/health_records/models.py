# apps/health_records/models.py

import uuid

from django.core.validators import MinValueValidator, MaxValueValidator
from django.db import models
from django.utils import timezone

from .bmi import classify_bmi, compute_bmi


class HealthRecord(models.Model):
    RECORD_TYPE_CHOICES = [
        ('Annual Physical', 'Annual Physical'),
        ('Vaccination', 'Vaccination'),
        ('Illness', 'Illness'),
        ('Injury', 'Injury'),
        ('Dental', 'Dental'),
        ('Vision', 'Vision'),
        ('Mental Health', 'Mental Health'),
        ('Other', 'Other'),
    ]

    MIN_HEIGHT_CM, MAX_HEIGHT_CM = 0, 300
    MIN_WEIGHT_KG, MAX_WEIGHT_KG = 0, 500
    MIN_TEMPERATURE_C, MAX_TEMPERATURE_C = 30, 45

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    student = models.ForeignKey(
        'students.Student',
        on_delete=models.CASCADE,
        related_name='health_records',
    )
    record_date = models.DateField(default=timezone.localdate)
    record_type = models.CharField(max_length=20, choices=RECORD_TYPE_CHOICES)
    height = models.FloatField(
        null=True, blank=True,
        validators=[MinValueValidator(MIN_HEIGHT_CM), MaxValueValidator(MAX_HEIGHT_CM)],
        help_text='Height in centimeters',
    )
    weight = models.FloatField(
        null=True, blank=True,
        validators=[MinValueValidator(MIN_WEIGHT_KG), MaxValueValidator(MAX_WEIGHT_KG)],
        help_text='Weight in kilograms',
    )
    blood_pressure = models.CharField(
        max_length=20, null=True, blank=True,
        help_text='Systolic/diastolic, e.g. 110/70',
    )
    temperature = models.FloatField(
        null=True, blank=True,
        validators=[MinValueValidator(MIN_TEMPERATURE_C), MaxValueValidator(MAX_TEMPERATURE_C)],
        help_text='Body temperature in Celsius',
    )
    allergies = models.TextField(null=True, blank=True)
    medications = models.TextField(null=True, blank=True)
    medical_notes = models.TextField(null=True, blank=True)
    treatment_plan = models.TextField(null=True, blank=True)
    next_appointment = models.DateField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'health_record'
        verbose_name = 'Health Record'
        verbose_name_plural = 'Health Records'
        ordering = ['-record_date', '-created_at']
        indexes = [
            models.Index(fields=['record_date'], name='health_records_record_date'),
            models.Index(fields=['student', 'record_date'], name='health_record_student_date'),
        ]

    def __str__(self):
        return f"{self.student.full_name} - {self.record_type} ({self.record_date})"

    @property
    def bmi(self):
        return compute_bmi(self.weight, self.height)

    @property
    def bmi_category(self):
        return classify_bmi(self.bmi)

    @property
    def days_since_record(self):
        return (timezone.localdate() - self.record_date).days

    @property
    def days_until_next_appointment(self):
        if not self.next_appointment:
            return None
        return (self.next_appointment - timezone.localdate()).days

    @property
    def follow_up_required(self):
        """True when a next appointment is scheduled in the future"""
        return bool(self.next_appointment and self.next_appointment > timezone.localdate())
