from django.contrib import admin
from .models import Enrollment


@admin.register(Enrollment)
class EnrollmentAdmin(admin.ModelAdmin):
    list_display = ('id', 'first_name', 'last_name', 'email', 'course', 'start_date', 'status', 'created_at')
    list_filter = ('status', 'course', 'created_at')
    search_fields = ('first_name', 'last_name', 'email', 'phone', 'course')
    readonly_fields = ('created_at',)
    fieldsets = (
        ('Applicant', {
            'fields': ('first_name', 'last_name', 'email', 'phone', 'education')
        }),
        ('Course', {
            'fields': ('course', 'start_date', 'status')
        }),
        ('Timestamps', {
            'fields': ('created_at',),
            'classes': ('collapse',)
        }),
    )
