from .directory_service import DirectoryService
from .fan_out_service import FanOutService
from .lifecycle_service import EvaluationLifecycleService
from .rating_service import CompetencyRatingStore, AppraisalResponseStore, RatingService, validate_rating
from .gap_analysis_service import GapAnalysisService, summarize_gaps
from .catalogue_service import CompetencyService, AppraisalQuestionService
from .assignment_service import AssessorAssignmentService
