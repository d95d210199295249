"""
Services module for TalentFlow.
"""

from talentflow.services.evaluation_service import EvaluationService, build_form_scores
from talentflow.services.feedback import (
    FeedbackGenerator,
    StaticFeedbackGenerator,
    build_feedback_prompt,
)

__all__ = [
    "EvaluationService",
    "build_form_scores",
    "FeedbackGenerator",
    "StaticFeedbackGenerator",
    "build_feedback_prompt",
]
