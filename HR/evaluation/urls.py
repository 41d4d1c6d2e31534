"""
URL configuration for the evaluation workflow.
"""
from django.urls import path

from . import views

app_name = 'evaluation'

urlpatterns = [
    # Evaluation endpoints
    path('evaluations/', views.evaluation_list, name='evaluation_list'),
    path('evaluations/self/', views.self_evaluation_create, name='self_evaluation_create'),
    path('evaluations/assessor/', views.assessor_evaluation_create, name='assessor_evaluation_create'),
    path('evaluations/<int:pk>/', views.evaluation_detail, name='evaluation_detail'),

    # Transition endpoints
    path('evaluations/<int:pk>/start/', views.evaluation_start, name='evaluation_start'),
    path('evaluations/<int:pk>/complete/', views.evaluation_complete, name='evaluation_complete'),
    path('evaluations/<int:pk>/review/', views.evaluation_review, name='evaluation_review'),
    path('evaluations/<int:pk>/status/', views.evaluation_status, name='evaluation_status'),

    # Rating endpoints
    path('evaluations/<int:pk>/ratings/', views.evaluation_ratings, name='evaluation_ratings'),
    path('evaluations/<int:pk>/responses/', views.evaluation_responses, name='evaluation_responses'),

    # Analytics endpoints
    path('analytics/gap/', views.gap_analysis, name='gap_analysis'),

    # Assessor assignment endpoints
    path('assignments/', views.assignment_list, name='assignment_list'),
    path('assignments/<int:pk>/', views.assignment_detail, name='assignment_detail'),

    # Catalogue endpoints
    path('competencies/', views.competency_list, name='competency_list'),
    path('questions/', views.question_list, name='question_list'),
]
