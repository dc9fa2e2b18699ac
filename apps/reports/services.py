import logging

from django.db.models import Count

from apps.health_records.bmi import BMI_CATEGORIES, classify_bmi, compute_bmi
from apps.health_records.models import HealthRecord
from apps.students.models import Student

logger = logging.getLogger(__name__)

ALL_GRADES = 'All Grades'
UNKNOWN_CATEGORY = 'Unknown'

# Grades that get their own bucket in grade statistics.
LABELED_GRADES = range(1, 11)


def ordinal_suffix(number):
    """English ordinal suffix: 1 -> 'st', 2 -> 'nd', 3 -> 'rd', 11-13 -> 'th'."""
    if 11 <= number % 100 <= 13:
        return 'th'
    return {1: 'st', 2: 'nd', 3: 'rd'}.get(number % 10, 'th')


def grade_label(grade):
    return f"{grade}{ordinal_suffix(grade)} Grade"


class StudentStatistics:
    """Summary views derived from the student and health record tables"""

    @staticmethod
    def grade_statistics():
        """
        Students per grade label plus an 'All Grades' total.

        Only grades 1-10 have labels. Kindergarten (0) and grades 11-12 are
        left out of the buckets and of the total.
        """
        per_grade = dict(
            Student.objects.values_list('grade').annotate(total=Count('id')).order_by('grade')
        )

        stats = {}
        total = 0
        excluded = 0
        for grade, count in per_grade.items():
            if grade not in LABELED_GRADES:
                excluded += count
                continue
            stats[grade_label(grade)] = count
            total += count
        stats[ALL_GRADES] = total

        if excluded:
            logger.debug("Grade statistics skipped %s student(s) outside grades 1-10", excluded)
        return stats

    @staticmethod
    def health_record_counts():
        """Number of health records per student id, zero included."""
        # One aggregate query, so every count comes from the same snapshot.
        rows = Student.objects.annotate(total=Count('health_records')).values_list('id', 'total')
        return {str(student_id): total for student_id, total in rows}

    @staticmethod
    def bmi_category_distribution():
        """
        Students per BMI category of their latest record with a computable BMI.
        Students with no such record are counted as 'Unknown'.
        """
        distribution = {category: 0 for category in BMI_CATEGORIES}
        distribution[UNKNOWN_CATEGORY] = 0

        latest = {}
        measured = (
            HealthRecord.objects
            .filter(height__isnull=False, weight__isnull=False)
            .order_by('student_id', '-record_date', '-created_at')
            .values_list('student_id', 'weight', 'height')
        )
        for student_id, weight, height in measured:
            if student_id in latest:
                continue
            bmi = compute_bmi(weight, height)
            if bmi is not None:
                latest[student_id] = classify_bmi(bmi)

        for student_id in Student.objects.values_list('id', flat=True):
            distribution[latest.get(student_id, UNKNOWN_CATEGORY)] += 1

        return distribution
