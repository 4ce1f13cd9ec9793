# eportal/services/examination_service.py

from typing import Any

from eportal.models.examination import ExamCard, Examination
from eportal.models.user import User
from eportal.services.crud_service import CRUDService


class ExaminationService(CRUDService[Examination]):

    async def before_create(self, session, data: dict[str, Any], actor: User) -> None:
        if data["end_time"] <= data["start_time"]:
            raise ValueError("end_time must be after start_time")


examination_service = ExaminationService(
    Examination, "examinations", order_by=(Examination.exam_date, Examination.start_time)
)
exam_card_service = CRUDService(
    ExamCard,
    "exam_cards",
    owner_field="student_id",
    order_by=ExamCard.created_at.desc(),
    actor_fields=("issued_by",),
)
