from django_filters import rest_framework as filters

from .models import Student
from .services import filter_by_full_name


class StudentFilter(filters.FilterSet):
    search = filters.CharFilter(method='filter_search')
    gender = filters.CharFilter(lookup_expr='iexact')
    grade = filters.NumberFilter()

    class Meta:
        model = Student
        fields = ['grade', 'gender', 'blood_type']

    def filter_search(self, queryset, name, value):
        return filter_by_full_name(queryset, value)
