from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from .models import User, OrganizationStudent


class OrganizationStudentInline(admin.TabularInline):
    model = OrganizationStudent
    fk_name = 'organization'
    extra = 0
    autocomplete_fields = ['student']
    fields = ['student', 'roll_number', 'course', 'year', 'status', 'created_at']
    readonly_fields = ['created_at']


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    list_display = ['username', 'name', 'email', 'role', 'roll_number', 'active']
    list_filter = ['role', 'active', 'is_staff']
    search_fields = ['username', 'name', 'email', 'roll_number']
    ordering = ['username']
    fieldsets = (
        (None, {'fields': ('username', 'password')}),
        ('Personal info', {'fields': ('name', 'email', 'role')}),
        ('Student profile', {'fields': ('roll_number', 'course', 'year')}),
        ('Permissions', {'fields': ('active', 'is_staff', 'is_superuser', 'groups', 'user_permissions')}),
        ('Important dates', {'fields': ('last_login', 'date_joined')}),
    )
    add_fieldsets = (
        (None, {
            'classes': ('wide',),
            'fields': ('username', 'email', 'name', 'role', 'password1', 'password2'),
        }),
    )
    filter_horizontal = ('groups', 'user_permissions')

    def get_inlines(self, request, obj):
        if obj is not None and obj.is_organization:
            return [OrganizationStudentInline]
        return []


@admin.register(OrganizationStudent)
class OrganizationStudentAdmin(admin.ModelAdmin):
    list_display = ['student', 'organization', 'roll_number', 'course', 'year', 'status', 'created_at']
    list_filter = ['status', 'organization']
    search_fields = ['student__username', 'student__email', 'roll_number', 'organization__name']
    autocomplete_fields = ['organization', 'student']
    readonly_fields = ['created_at']
