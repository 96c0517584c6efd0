from django.contrib import admin

from errorlog.models import ErrorLog


@admin.register(ErrorLog)
class ErrorLogAdmin(admin.ModelAdmin):
    list_display = ["error_type", "error_message", "request_method", "request_url", "created_at"]
    list_filter = ["error_type"]
    search_fields = ["error_message", "request_url"]
    readonly_fields = [field.name for field in ErrorLog._meta.fields]

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
