"""
Admin Models - System users, system logs and health reports.
"""
import enum
from typing import List, Optional
from ..core.schemas import CamelModel, StoredEntity

class UserRole(str, enum.Enum):
    """Enum for system user roles"""
    ADMIN = "admin"
    DOCTOR = "doctor"
    NURSE = "nurse"
    RECEPTIONIST = "receptionist"
    LAB_TECHNICIAN = "lab_technician"

class AccountStatus(str, enum.Enum):
    """Enum for system user account status"""
    ACTIVE = "active"
    INACTIVE = "inactive"
    SUSPENDED = "suspended"

class LogStatus(str, enum.Enum):
    """Enum for the outcome recorded in a system log entry"""
    SUCCESS = "success"
    FAILED = "failed"
    WARNING = "warning"

class SystemUser(StoredEntity):
    """
    System User Model - Stores staff accounts of the dashboard

    Fields:
    - name: User's full name
    - email: Login email
    - role: Staff role
    - department: Department (optional)
    - status: Account status
    - last_login: Time of the last login (optional)
    - permissions: Granted permission names
    """
    name: str
    email: str
    role: UserRole
    department: Optional[str] = None
    status: AccountStatus = AccountStatus.ACTIVE
    last_login: Optional[str] = None
    permissions: List[str] = []

class SystemLog(CamelModel):
    """
    System Log Model - One audit entry, append only

    Fields:
    - id: Epoch-millisecond string
    - user_id: Id of the acting user
    - user_name: Name of the acting user
    - action: What was done
    - resource: What it was done to
    - details: Free text context (optional)
    - ip_address: Client address (optional)
    - status: Outcome of the action
    - timestamp: ISO-8601 time the entry was written
    """
    id: str
    user_id: str
    user_name: str
    action: str
    resource: str
    details: Optional[str] = None
    ip_address: Optional[str] = None
    status: LogStatus = LogStatus.SUCCESS
    timestamp: str

class SystemHealth(CamelModel):
    """Health report served by the admin health endpoint"""
    status: str = "healthy"
    uptime: str = "99.9%"
    database: str
    api: str = "operational"
    storage: int
    storage_used: float
    active_users: int
    timestamp: str
