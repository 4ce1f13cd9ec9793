# eportal/models/registry.py
# Importing this module registers every table on SQLModel.metadata.

from eportal.models.user import User  # noqa: F401
from eportal.models.auth_session import AuthSession  # noqa: F401
from eportal.models.rbac import Role, Permission, RolePermission, UserRoleLink  # noqa: F401
from eportal.models.academic import Faculty, Department, Programme, AcademicSession  # noqa: F401
from eportal.models.course import Course, CourseAllocation, CourseRegistration, Attendance  # noqa: F401
from eportal.models.result import Result  # noqa: F401
from eportal.models.finance import FeeStructure, Payment, Scholarship, ScholarshipApplication  # noqa: F401
from eportal.models.hostel import Hostel, HostelRoom, HostelAllocation  # noqa: F401
from eportal.models.communication import Announcement, Notification  # noqa: F401
from eportal.models.records import Clearance, Document, Transcript, Certificate, Alumni  # noqa: F401
from eportal.models.examination import Examination, ExamCard  # noqa: F401
from eportal.models.governance import Petition, SenateDecision  # noqa: F401
from eportal.models.audit import AuditLog  # noqa: F401
from eportal.models.system_setting import SystemSetting  # noqa: F401
