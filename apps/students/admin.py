from django.contrib import admin

from .models import Student


@admin.register(Student)
class StudentAdmin(admin.ModelAdmin):
    list_display = ('first_name', 'last_name', 'grade', 'gender', 'date_of_birth', 'blood_type')
    list_filter = ('grade', 'gender', 'blood_type')
    search_fields = ('first_name', 'last_name', 'father_name', 'mother_name')
    ordering = ('first_name', 'last_name')
