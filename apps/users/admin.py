from django.contrib import admin
from .models import User, UserPreference


class UserPreferenceInline(admin.StackedInline):
    model = UserPreference
    extra = 0
    can_delete = False


@admin.register(User)
class UserAdmin(admin.ModelAdmin):
    list_display = ('email', 'first_name', 'last_name', 'created_at')
    search_fields = ('email', 'first_name', 'last_name')
    filter_horizontal = ('saved_products',)
    inlines = [UserPreferenceInline]
