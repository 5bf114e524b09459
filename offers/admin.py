from django.contrib import admin
from .models import Offer


@admin.register(Offer)
class OfferAdmin(admin.ModelAdmin):
    list_display = ('code', 'title', 'discount', 'valid_until', 'is_active', 'currently_active', 'created_at')
    list_filter = ('is_active', 'valid_until')
    search_fields = ('code', 'title', 'description')
    readonly_fields = ('created_at',)

    @admin.display(boolean=True, description='Live')
    def currently_active(self, obj):
        return obj.is_currently_active()
