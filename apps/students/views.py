#apps/students/views.py:

from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.response import Response
from rest_framework.permissions import IsAuthenticated
from django_filters.rest_framework import DjangoFilterBackend
from rest_framework.filters import OrderingFilter

from apps.health_records.serializers import HealthRecordSerializer
from apps.health_records.services import HealthRecordService
from .filters import StudentFilter
from .models import Student
from .serializers import StudentSerializer, StudentWriteSerializer
from .services import StudentService


class StudentViewSet(viewsets.ModelViewSet):
    queryset = Student.objects.all()
    serializer_class = StudentSerializer
    permission_classes = [IsAuthenticated]
    filter_backends = [DjangoFilterBackend, OrderingFilter]
    filterset_class = StudentFilter
    ordering_fields = ['first_name', 'last_name', 'grade', 'date_of_birth', 'created_at']
    ordering = ['first_name', 'last_name']

    def get_queryset(self):
        return StudentService.list()

    def get_serializer_class(self):
        if self.action in ['create', 'update', 'partial_update']:
            return StudentWriteSerializer
        return StudentSerializer

    def get_object(self):
        student = StudentService.get(self.kwargs[self.lookup_field])
        self.check_object_permissions(self.request, student)
        return student

    def create(self, request, *args, **kwargs):
        student = StudentService.create(request.data)
        return Response(StudentSerializer(student).data, status=status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        """PUT and PATCH both apply a partial update"""
        student = StudentService.update(self.kwargs[self.lookup_field], request.data)
        return Response(StudentSerializer(student).data)

    def destroy(self, request, *args, **kwargs):
        removed = StudentService.delete(self.kwargs[self.lookup_field])
        return Response({
            'message': 'Student deleted successfully',
            'deleted_health_records': removed,
        })

    @action(detail=True, methods=['get'], url_path='health-records')
    def health_records(self, request, pk=None):
        """Health records of the student, most recent first"""
        records = HealthRecordService.list_by_student(pk)
        return Response(HealthRecordSerializer(records, many=True).data)
