# apps/health_records/views.py

from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.response import Response
from rest_framework.permissions import IsAuthenticated
from django_filters.rest_framework import DjangoFilterBackend
from rest_framework.filters import OrderingFilter

from .models import HealthRecord
from .serializers import HealthRecordSerializer, HealthRecordWriteSerializer
from .services import HealthRecordService


class HealthRecordViewSet(viewsets.ModelViewSet):
    queryset = HealthRecord.objects.all()
    serializer_class = HealthRecordSerializer
    permission_classes = [IsAuthenticated]
    filter_backends = [DjangoFilterBackend, OrderingFilter]
    filterset_fields = ['student', 'record_type', 'record_date']
    ordering_fields = ['record_date', 'created_at']
    ordering = ['-record_date', '-created_at']

    def get_queryset(self):
        return HealthRecordService.list()

    def get_serializer_class(self):
        if self.action in ['create', 'update', 'partial_update']:
            return HealthRecordWriteSerializer
        return HealthRecordSerializer

    def get_object(self):
        record = HealthRecordService.get(self.kwargs[self.lookup_field])
        self.check_object_permissions(self.request, record)
        return record

    def create(self, request, *args, **kwargs):
        record = HealthRecordService.create(request.data)
        return Response(HealthRecordSerializer(record).data, status=status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        """PUT and PATCH both apply a partial update"""
        record = HealthRecordService.update(self.kwargs[self.lookup_field], request.data)
        return Response(HealthRecordSerializer(record).data)

    def destroy(self, request, *args, **kwargs):
        HealthRecordService.delete(self.kwargs[self.lookup_field])
        return Response(status=status.HTTP_204_NO_CONTENT)

    @action(detail=False, methods=['get'], url_path=r'student/(?P<student_id>[^/.]+)')
    def by_student(self, request, student_id=None):
        """Health records of one student, most recent first"""
        records = HealthRecordService.list_by_student(student_id)
        return Response(HealthRecordSerializer(records, many=True).data)
