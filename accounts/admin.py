from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from accounts.models import CustomUser, UserProfile, UserSessions
from accounts.forms import CustomUserCreationForm, CustomUserChangeForm


class UserProfileInline(admin.StackedInline):
    model = UserProfile
    can_delete = False


class CustomUserAdmin(BaseUserAdmin):
    model = CustomUser
    add_form = CustomUserCreationForm
    form = CustomUserChangeForm
    inlines = [UserProfileInline]

    list_display = ('username', 'role', 'is_active', 'created_at')
    list_filter = ('role', 'is_active')
    ordering = ('username',)
    search_fields = ('username',)

    fieldsets = (
        (None, {'fields': ('username', 'password')}),
        ('Portal', {'fields': ('role', 'profile_picture')}),
        ('Permissions', {'fields': ('is_active', 'is_staff', 'is_superuser')}),
        ('Important Dates', {'fields': ('last_login',)}),
    )

    add_fieldsets = (
        (None, {
            'classes': ('wide',),
            'fields': ('username', 'role', 'password1', 'password2'),
        }),
    )


@admin.register(UserSessions)
class UserSessionsAdmin(admin.ModelAdmin):
    list_display = ('id', 'user', 'created_at', 'expires_at')
    list_filter = ('expires_at',)


admin.site.register(CustomUser, CustomUserAdmin)
