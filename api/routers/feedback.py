"""
Feedback Router - Participant reviews of camps.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, status

from greencare.feedback import FeedbackBook
from greencare.models import FeedbackRecord

from ..dependencies import get_feedback_book
from ..schemas import FeedbackCreate

router = APIRouter(prefix="/feedback", tags=["feedback"])

FeedbackDep = Annotated[FeedbackBook, Depends(get_feedback_book)]


@router.post("", response_model=FeedbackRecord, status_code=status.HTTP_201_CREATED)
async def submit_feedback(request: FeedbackCreate, feedback: FeedbackDep) -> FeedbackRecord:
    return await feedback.submit(request.model_dump(exclude_none=True))


@router.get("", response_model=list[FeedbackRecord])
async def list_feedback(feedback: FeedbackDep) -> list[FeedbackRecord]:
    return await feedback.list_all()
