# eportal/api/endpoints/examinations.py

from fastapi import APIRouter

from eportal.api.crud import add_crud_routes
from eportal.schemas.examination import (
    ExamCardCreate, ExamCardRead, ExamCardUpdate,
    ExaminationCreate, ExaminationRead, ExaminationUpdate,
)
from eportal.services.examination_service import exam_card_service, examination_service

examinations_router = APIRouter(prefix="/api/examinations", tags=["Examinations"])
add_crud_routes(
    examinations_router, examination_service, ExaminationCreate, ExaminationUpdate, ExaminationRead, "Examination"
)

exam_cards_router = APIRouter(prefix="/api/exam-cards", tags=["Examinations"])
add_crud_routes(exam_cards_router, exam_card_service, ExamCardCreate, ExamCardUpdate, ExamCardRead, "Exam card")

routers = [examinations_router, exam_cards_router]
