"""
Evaluation App Configuration
"""

from django.apps import AppConfig


class EvaluationConfig(AppConfig):
    """Configuration for the competency evaluation workflow app"""
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'HR.evaluation'
    label = 'evaluation'
    verbose_name = 'Competency Evaluation'
