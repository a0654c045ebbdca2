from django.contrib.auth.forms import UserCreationForm, UserChangeForm
from .models import Admin


class AdminCreationForm(UserCreationForm):
    """Creation form for the email-based Admin model"""

    class Meta(UserCreationForm.Meta):
        model = Admin
        fields = ('email', 'name', 'role')


class AdminChangeForm(UserChangeForm):

    class Meta(UserChangeForm.Meta):
        model = Admin
        fields = ('email', 'name', 'role', 'is_active')
