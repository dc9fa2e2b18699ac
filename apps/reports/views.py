from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.response import Response
from rest_framework.permissions import IsAuthenticated

from .services import StudentStatistics


class ReportsViewSet(viewsets.GenericViewSet):
    """Read-only statistics computed on demand"""
    permission_classes = [IsAuthenticated]

    @action(detail=False, methods=['get'], url_path='grade-statistics')
    def grade_statistics(self, request):
        """Students per grade label and the 'All Grades' total"""
        return Response(StudentStatistics.grade_statistics())

    @action(detail=False, methods=['get'], url_path='health-record-counts')
    def health_record_counts(self, request):
        """Health record count per student id"""
        return Response(StudentStatistics.health_record_counts())

    @action(detail=False, methods=['get'], url_path='bmi-categories')
    def bmi_categories(self, request):
        """Students per BMI category of their latest measurement"""
        return Response(StudentStatistics.bmi_category_distribution())
