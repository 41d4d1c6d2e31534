# Evaluation instances and their choices
from .evaluation import (
    EvaluationInstance,
    EvaluationType,
    EvaluationKind,
    EvaluationStatus,
    FINISHED_STATUSES,
)

# Catalogue
from .catalogue import Competency, AppraisalQuestion

# Ratings and appraisal responses
from .rating import RatingEntry, QuestionResponse

# Assessor scoping
from .assignment import AssessorAssignment
