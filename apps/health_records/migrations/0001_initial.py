import uuid

import django.core.validators
import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('students', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='HealthRecord',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('record_date', models.DateField(default=django.utils.timezone.localdate)),
                ('record_type', models.CharField(choices=[('Annual Physical', 'Annual Physical'), ('Vaccination', 'Vaccination'), ('Illness', 'Illness'), ('Injury', 'Injury'), ('Dental', 'Dental'), ('Vision', 'Vision'), ('Mental Health', 'Mental Health'), ('Other', 'Other')], max_length=20)),
                ('height', models.FloatField(blank=True, help_text='Height in centimeters', null=True, validators=[django.core.validators.MinValueValidator(0), django.core.validators.MaxValueValidator(300)])),
                ('weight', models.FloatField(blank=True, help_text='Weight in kilograms', null=True, validators=[django.core.validators.MinValueValidator(0), django.core.validators.MaxValueValidator(500)])),
                ('blood_pressure', models.CharField(blank=True, help_text='Systolic/diastolic, e.g. 110/70', max_length=20, null=True)),
                ('temperature', models.FloatField(blank=True, help_text='Body temperature in Celsius', null=True, validators=[django.core.validators.MinValueValidator(30), django.core.validators.MaxValueValidator(45)])),
                ('allergies', models.TextField(blank=True, null=True)),
                ('medications', models.TextField(blank=True, null=True)),
                ('medical_notes', models.TextField(blank=True, null=True)),
                ('treatment_plan', models.TextField(blank=True, null=True)),
                ('next_appointment', models.DateField(blank=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('student', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='health_records', to='students.student')),
            ],
            options={
                'verbose_name': 'Health Record',
                'verbose_name_plural': 'Health Records',
                'db_table': 'health_record',
                'ordering': ['-record_date', '-created_at'],
                'indexes': [
                    models.Index(fields=['record_date'], name='health_records_record_date'),
                    models.Index(fields=['student', 'record_date'], name='health_record_student_date'),
                ],
            },
        ),
    ]
