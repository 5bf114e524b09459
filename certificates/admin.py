from django.contrib import admin
from .models import Certificate


@admin.register(Certificate)
class CertificateAdmin(admin.ModelAdmin):
    list_display = ('certificate_id', 'student_name', 'course_name', 'grade', 'issue_date', 'is_valid', 'created_at')
    list_filter = ('is_valid', 'course_name', 'issue_date')
    search_fields = ('certificate_id', 'student_name', 'course_name', 'instructor')
    readonly_fields = ('credential_url', 'created_at')
    actions = ['revoke']

    @admin.action(description='Revoke selected certificates')
    def revoke(self, request, queryset):
        queryset.update(is_valid=False)
