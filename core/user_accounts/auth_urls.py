"""
URL Configuration for Authentication endpoints.
"""
from django.urls import path
from rest_framework_simplejwt.views import TokenRefreshView

from . import views

app_name = 'auth'

urlpatterns = [
    path('login/', views.login, name='login'),
    path('me/', views.me, name='me'),

    # Token management
    path('token/refresh/', TokenRefreshView.as_view(), name='token_refresh'),
]
