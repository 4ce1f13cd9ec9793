# eportal/services/records_service.py

from typing import Any

from eportal.core.timeutils import utcnow
from eportal.models.records import Alumni, Certificate, Clearance, Document, Transcript
from eportal.models.user import User
from eportal.services.crud_service import CRUDService

CLEARANCE_OFFICES = ("bursary", "library", "hostel", "department", "faculty")


class ClearanceService(CRUDService[Clearance]):
    """Each office signs off separately; status follows the five flags."""

    async def before_update(self, session, obj: Clearance, changes: dict[str, Any], actor: User) -> None:
        now = utcnow()
        for office in CLEARANCE_OFFICES:
            flag = changes.get(f"{office}_cleared")
            if flag is None:
                changes.pop(f"{office}_cleared", None)
                continue
            if flag and not getattr(obj, f"{office}_cleared"):
                changes[f"{office}_cleared_by"] = actor.id
                changes[f"{office}_cleared_at"] = now
            elif not flag:
                changes[f"{office}_cleared_by"] = None
                changes[f"{office}_cleared_at"] = None

        if "status" in changes:
            return

        cleared = [
            changes.get(f"{office}_cleared", getattr(obj, f"{office}_cleared"))
            for office in CLEARANCE_OFFICES
        ]
        if all(cleared):
            changes["status"] = "Completed"
            changes["completed_at"] = obj.completed_at or now
        elif any(cleared):
            changes["status"] = "Partial"
            changes["completed_at"] = None
        else:
            changes["status"] = "Pending"
            changes["completed_at"] = None


class DocumentService(CRUDService[Document]):

    async def before_update(self, session, obj: Document, changes: dict[str, Any], actor: User) -> None:
        status = changes.get("verification_status")
        if status == "Verified" or changes.get("is_verified"):
            changes["is_verified"] = True
            changes["verification_status"] = "Verified"
            changes["verified_by"] = actor.id
            changes["verified_at"] = utcnow()
        elif status == "Rejected":
            changes["is_verified"] = False


class TranscriptService(CRUDService[Transcript]):

    async def before_update(self, session, obj: Transcript, changes: dict[str, Any], actor: User) -> None:
        status = changes.get("status")
        if status == "Processing" and not obj.processed_by and not changes.get("processed_by"):
            changes["processed_by"] = actor.id
            changes["processed_at"] = utcnow()
        if status == "Ready" and not obj.verified_by and not changes.get("verified_by"):
            changes["verified_by"] = actor.id
            changes["verified_at"] = utcnow()


class CertificateService(CRUDService[Certificate]):

    async def before_update(self, session, obj: Certificate, changes: dict[str, Any], actor: User) -> None:
        if changes.get("status") == "Issued" and obj.status != "Issued":
            changes.setdefault("issued_by", actor.id)
            if not changes.get("issued_date"):
                changes["issued_date"] = utcnow().date()


clearance_service = ClearanceService(
    Clearance, "clearances", owner_field="student_id", order_by=Clearance.created_at.desc()
)
document_service = DocumentService(
    Document, "documents", owner_field="user_id", order_by=Document.created_at.desc()
)
transcript_service = TranscriptService(
    Transcript, "transcripts", owner_field="student_id", order_by=Transcript.created_at.desc()
)
certificate_service = CertificateService(
    Certificate, "certificates", owner_field="student_id", order_by=Certificate.created_at.desc()
)
alumni_service = CRUDService(Alumni, "alumni", owner_field="user_id", order_by=Alumni.graduation_year.desc())
