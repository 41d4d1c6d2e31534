"""
URL configuration for hr_platform project.

The `urlpatterns` list routes URLs to views. For more information please see:
    https://docs.djangoproject.com/en/5.2/topics/http/urls/
"""
from django.urls import path, include

urlpatterns = [
    path('auth/', include('core.user_accounts.auth_urls')),
    path('hr/', include('HR.urls')),
]
