from .evaluation_views import (
    evaluation_list,
    self_evaluation_create,
    assessor_evaluation_create,
    evaluation_detail,
    evaluation_start,
    evaluation_complete,
    evaluation_review,
    evaluation_status,
)
from .rating_views import evaluation_ratings, evaluation_responses
from .analytics_views import gap_analysis
from .assignment_views import assignment_list, assignment_detail
from .catalogue_views import competency_list, question_list
