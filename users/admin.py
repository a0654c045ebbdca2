from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from .models import Admin
from .forms import AdminCreationForm, AdminChangeForm


@admin.register(Admin)
class AdminUserAdmin(BaseUserAdmin):
    """
    Admin account management.

    Super admins have every permission on this site. Regular admins work
    through the API (/api/) and see only what they are granted here.
    """
    form = AdminChangeForm
    add_form = AdminCreationForm
    ordering = ['email']
    list_display = ['email', 'name', 'role', 'is_active', 'date_joined']
    list_filter = ['role', 'is_active']
    search_fields = ['email', 'name']
    readonly_fields = ['last_login', 'date_joined', 'updated_at']

    fieldsets = (
        (None, {'fields': ('email', 'password')}),
        ('Profile', {'fields': ('name', 'role', 'is_active')}),
        ('Dates', {
            'fields': ('last_login', 'date_joined', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    add_fieldsets = (
        (None, {
            'classes': ('wide',),
            'fields': ('email', 'name', 'role', 'password1', 'password2'),
        }),
    )
