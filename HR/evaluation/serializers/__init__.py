from .evaluation_serializers import (
    EvaluationInstanceSerializer,
    SelfEvaluationCreateSerializer,
    AssessorEvaluationCreateSerializer,
    EvaluationStatusSerializer,
    EvaluationFilterSerializer,
)
from .catalogue_serializers import (
    CompetencySerializer,
    CompetencyCreateSerializer,
    AppraisalQuestionSerializer,
)
from .rating_serializers import (
    RatingEntrySerializer,
    QuestionResponseSerializer,
    RatingSubmitSerializer,
)
from .assignment_serializers import (
    AssessorAssignmentSerializer,
    AssessorAssignmentCreateSerializer,
    AssessorAssignmentUpdateSerializer,
    AssessorAssignmentFilterSerializer,
)
from .analytics_serializers import GapAnalysisQuerySerializer
