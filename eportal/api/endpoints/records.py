# eportal/api/endpoints/records.py

from fastapi import APIRouter

from eportal.api.crud import add_crud_routes
from eportal.schemas.records import (
    AlumniCreate, AlumniRead, AlumniUpdate,
    CertificateCreate, CertificateRead, CertificateUpdate,
    ClearanceCreate, ClearanceRead, ClearanceUpdate,
    DocumentCreate, DocumentRead, DocumentUpdate,
    TranscriptCreate, TranscriptRead, TranscriptUpdate,
)
from eportal.services.records_service import (
    alumni_service,
    certificate_service,
    clearance_service,
    document_service,
    transcript_service,
)

clearances_router = APIRouter(prefix="/api/clearances", tags=["Records"])
add_crud_routes(clearances_router, clearance_service, ClearanceCreate, ClearanceUpdate, ClearanceRead, "Clearance")

documents_router = APIRouter(prefix="/api/documents", tags=["Records"])
add_crud_routes(documents_router, document_service, DocumentCreate, DocumentUpdate, DocumentRead, "Document")

transcripts_router = APIRouter(prefix="/api/transcripts", tags=["Records"])
add_crud_routes(transcripts_router, transcript_service, TranscriptCreate, TranscriptUpdate, TranscriptRead, "Transcript")

certificates_router = APIRouter(prefix="/api/certificates", tags=["Records"])
add_crud_routes(certificates_router, certificate_service, CertificateCreate, CertificateUpdate, CertificateRead, "Certificate")

alumni_router = APIRouter(prefix="/api/alumni", tags=["Records"])
add_crud_routes(alumni_router, alumni_service, AlumniCreate, AlumniUpdate, AlumniRead, "Alumni record")

routers = [clearances_router, documents_router, transcripts_router, certificates_router, alumni_router]
