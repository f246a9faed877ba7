"""Strongly typed identifiers for Alumni Connect domain entities.

Using NewType keeps thread, survey and alumni IDs from being mixed up.
"""

from typing import NewType
from uuid import UUID

# Community
AlumniId = NewType("AlumniId", UUID)
ThreadId = NewType("ThreadId", UUID)
ThreadVoteId = NewType("ThreadVoteId", UUID)
TagId = NewType("TagId", UUID)

# Surveys
SurveyId = NewType("SurveyId", UUID)
SectionId = NewType("SectionId", UUID)
QuestionId = NewType("QuestionId", UUID)
OptionId = NewType("OptionId", UUID)
FeedbackResponseId = NewType("FeedbackResponseId", UUID)
QuestionResponseId = NewType("QuestionResponseId", UUID)
