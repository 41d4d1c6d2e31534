"""
Data Transfer Objects for the Evaluation Domain

DTOs carry validated request data from serializers into the service layer.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class SelfEvaluationCreateDTO:
    """DTO for creating (or fetching) a SELF evaluation"""
    kind: str
    employee_id: Optional[int] = None
    cycle: Optional[str] = None


@dataclass
class AssessorEvaluationCreateDTO:
    """DTO for creating (or fetching) an ASSESSOR evaluation"""
    employee_id: int
    kind: str
    assessor_id: Optional[int] = None
    cycle: Optional[str] = None


@dataclass
class EvaluationFilterDTO:
    """Optional filters for listing evaluations"""
    kind: Optional[str] = None
    type: Optional[str] = None
    status: Optional[str] = None
    employee_id: Optional[int] = None
    cycle: Optional[str] = None
    search: Optional[str] = None


@dataclass
class RatingSubmitDTO:
    """
    DTO for a rating submission.

    COMPETENCY evaluations take competency_id, APPRAISAL evaluations take
    question_id.
    """
    evaluation_id: int
    rating: int
    competency_id: Optional[int] = None
    question_id: Optional[int] = None
    comment: Optional[str] = ''


@dataclass
class GapAnalysisQueryDTO:
    """DTO for a gap analysis query"""
    kind: str
    granularity: str = 'organization'
    employee_id: Optional[int] = None
    department_id: Optional[int] = None
    job_id: Optional[int] = None
    cycle: Optional[str] = None
    evaluation_id: Optional[int] = None


@dataclass
class AssessorAssignmentCreateDTO:
    """DTO for assigning an assessor to an employee"""
    assessor_id: int
    employee_id: int


@dataclass
class AssessorAssignmentUpdateDTO:
    """DTO for changing either side of an assessor assignment"""
    assignment_id: int
    assessor_id: Optional[int] = None
    employee_id: Optional[int] = None


@dataclass
class CompetencyCreateDTO:
    """DTO for adding a competency to the catalogue"""
    name: str
    description: Optional[str] = ''
