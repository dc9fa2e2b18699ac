from django.contrib import admin

from .models import HealthRecord


@admin.register(HealthRecord)
class HealthRecordAdmin(admin.ModelAdmin):
    list_display = ('student', 'record_date', 'record_type', 'height', 'weight', 'display_bmi')
    list_filter = ('record_type', 'record_date')
    search_fields = ('student__first_name', 'student__last_name')
    list_select_related = ('student',)
    readonly_fields = ('display_bmi',)

    @admin.display(description='BMI')
    def display_bmi(self, obj):
        return obj.bmi
