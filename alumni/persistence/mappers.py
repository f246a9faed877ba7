"""Mappers for converting between database rows and domain models.

Domain models are immutable pydantic models, so rows are mapped by hand
instead of through SQLAlchemy's ORM.
"""

from typing import Any, Dict, Optional
from uuid import UUID

from alumni.domain.model import (
    Alumnus,
    FeedbackResponse,
    QuestionResponse,
    Survey,
    SurveyOption,
    SurveyQuestion,
    SurveySection,
    Tag,
    Thread,
    ThreadVote,
)
from alumni.domain.value import (
    AlumniId,
    FeedbackResponseId,
    OptionId,
    QuestionId,
    QuestionResponseId,
    QuestionType,
    SectionId,
    SurveyId,
    TagId,
    TagName,
    ThreadId,
    ThreadVoteId,
    VoteChoice,
)


def _uuid(value: Any) -> UUID:
    """Normalize a UUID column value (drivers may return str)."""
    return UUID(value) if isinstance(value, str) else value


def _optional_uuid(value: Any) -> Optional[UUID]:
    return _uuid(value) if value is not None else None


def row_to_alumnus(row: Dict[str, Any]) -> Alumnus:
    """Convert database row to Alumnus domain model."""
    return Alumnus(
        id=AlumniId(_uuid(row["id"])),
        email=row["email"],
        first_name=row["first_name"],
        last_name=row["last_name"],
        created_at=row["created_at"],
    )


def alumnus_to_dict(alumnus: Alumnus) -> Dict[str, Any]:
    """Convert Alumnus domain model to database dict."""
    return alumnus.model_dump()


def row_to_tag(row: Dict[str, Any]) -> Tag:
    """Convert database row to Tag domain model."""
    return Tag(
        id=TagId(_uuid(row["id"])),
        name=TagName(row["name"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def tag_to_dict(tag: Tag) -> Dict[str, Any]:
    """Convert Tag domain model to database dict."""
    return {
        "id": tag.id,
        "name": tag.name.root,
        "created_at": tag.created_at,
        "updated_at": tag.updated_at,
    }


def row_to_thread(row: Dict[str, Any], tag_names: list[str] | None = None) -> Thread:
    """Convert database row to Thread domain model.

    Args:
        row: Database row as dict
        tag_names: Names of tags joined from thread_tags

    Returns:
        Thread domain model
    """
    return Thread(
        id=ThreadId(_uuid(row["id"])),
        title=row["title"],
        description=row.get("description"),
        author_id=AlumniId(_uuid(row["author_id"])),
        tag_names=[TagName(name) for name in tag_names or []],
        upvotes=row["upvotes"],
        downvotes=row["downvotes"],
        views=row["views"],
        comments_count=row["comments_count"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def thread_to_dict(thread: Thread) -> Dict[str, Any]:
    """Convert Thread domain model to a threads row (tags are stored separately)."""
    return thread.model_dump(exclude={"tag_names"})


def row_to_thread_vote(row: Dict[str, Any]) -> ThreadVote:
    """Convert database row to ThreadVote domain model."""
    return ThreadVote(
        id=ThreadVoteId(_uuid(row["id"])),
        alumni_id=AlumniId(_uuid(row["alumni_id"])),
        thread_id=ThreadId(_uuid(row["thread_id"])),
        choice=VoteChoice(row["choice"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def thread_vote_to_dict(vote: ThreadVote) -> Dict[str, Any]:
    """Convert ThreadVote domain model to database dict."""
    data = vote.model_dump()
    data["choice"] = vote.choice.value
    return data


def row_to_survey(row: Dict[str, Any]) -> Survey:
    """Convert database row to Survey domain model."""
    return Survey(
        id=SurveyId(_uuid(row["id"])),
        title=row["title"],
        description=row.get("description"),
        creation_date=row["creation_date"],
        start_date=row["start_date"],
        end_date=row["end_date"],
    )


def survey_to_dict(survey: Survey) -> Dict[str, Any]:
    """Convert Survey domain model to database dict."""
    return survey.model_dump()


def row_to_section(row: Dict[str, Any]) -> SurveySection:
    """Convert database row to SurveySection domain model."""
    return SurveySection(
        id=SectionId(_uuid(row["id"])),
        survey_id=SurveyId(_uuid(row["survey_id"])),
        section_title=row["section_title"],
        section_description=row.get("section_description"),
        position=row["position"],
    )


def section_to_dict(section: SurveySection) -> Dict[str, Any]:
    """Convert SurveySection domain model to database dict."""
    return section.model_dump()


def row_to_question(row: Dict[str, Any]) -> SurveyQuestion:
    """Convert database row to SurveyQuestion domain model."""
    return SurveyQuestion(
        id=QuestionId(_uuid(row["id"])),
        survey_id=SurveyId(_uuid(row["survey_id"])),
        section_id=SectionId(_uuid(row["section_id"])),
        question_text=row["question_text"],
        question_type=QuestionType(row["question_type"]),
        position=row["position"],
    )


def question_to_dict(question: SurveyQuestion) -> Dict[str, Any]:
    """Convert SurveyQuestion domain model to database dict."""
    data = question.model_dump()
    data["question_type"] = question.question_type.value
    return data


def row_to_option(row: Dict[str, Any]) -> SurveyOption:
    """Convert database row to SurveyOption domain model."""
    return SurveyOption(
        id=OptionId(_uuid(row["id"])),
        question_id=QuestionId(_uuid(row["question_id"])),
        option_text=row["option_text"],
        option_value=row.get("option_value"),
        position=row["position"],
    )


def option_to_dict(option: SurveyOption) -> Dict[str, Any]:
    """Convert SurveyOption domain model to database dict."""
    return option.model_dump()


def row_to_feedback_response(row: Dict[str, Any]) -> FeedbackResponse:
    """Convert database row to FeedbackResponse domain model."""
    return FeedbackResponse(
        id=FeedbackResponseId(_uuid(row["id"])),
        survey_id=SurveyId(_uuid(row["survey_id"])),
        alumni_id=AlumniId(_uuid(row["alumni_id"])),
        response_date=row["response_date"],
    )


def feedback_response_to_dict(response: FeedbackResponse) -> Dict[str, Any]:
    """Convert FeedbackResponse domain model to database dict."""
    return response.model_dump()


def row_to_question_response(row: Dict[str, Any]) -> QuestionResponse:
    """Convert database row to QuestionResponse domain model."""
    option_id = _optional_uuid(row.get("option_id"))
    return QuestionResponse(
        id=QuestionResponseId(_uuid(row["id"])),
        response_id=FeedbackResponseId(_uuid(row["response_id"])),
        question_id=QuestionId(_uuid(row["question_id"])),
        option_id=OptionId(option_id) if option_id else None,
        response_text=row.get("response_text"),
    )


def question_response_to_dict(answer: QuestionResponse) -> Dict[str, Any]:
    """Convert QuestionResponse domain model to database dict."""
    return answer.model_dump()
