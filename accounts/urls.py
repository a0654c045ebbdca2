from django.urls import path
from rest_framework_simplejwt.views import TokenObtainPairView, TokenRefreshView
from . import views

app_name = 'accounts'

urlpatterns = [
    # JWT Authentication
    path('login/', TokenObtainPairView.as_view(), name='token_obtain_pair'),
    path('refresh/', TokenRefreshView.as_view(), name='token_refresh'),

    # Session Authentication
    path('session/', views.session_login, name='session_login'),
    path('logout/', views.session_logout, name='logout'),
    path('me/', views.me, name='me'),
]
