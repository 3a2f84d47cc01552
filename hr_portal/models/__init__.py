from hr_portal.models.audit_event import AuditEvent
from hr_portal.models.auth_session import AuthSession
from hr_portal.models.document import Document
from hr_portal.models.employee_rating import EmployeeRating
from hr_portal.models.user import User
from hr_portal.models.vacation_request import VacationRequest

__all__ = [ "AuditEvent", "AuthSession", "Document",
           "EmployeeRating", "User", "VacationRequest" ]
