"""
Pydantic Schemas - stored records and request/response bodies.

Records are persisted with camelCase keys (minCGPA, eligibleBranches,
interviewSlot, ...). Python code works with snake_case attributes; the
alias generator maps between the two.
"""

import re
from datetime import date, datetime
from enum import Enum
from typing import Annotated, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from pydantic.alias_generators import to_camel


TIME_PATTERN = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def _split_lines(value):
    if isinstance(value, str):
        return [line.strip() for line in value.split("\n") if line.strip()]
    return value


def _check_time(value: str) -> str:
    if not TIME_PATTERN.match(value):
        raise ValueError("time must be HH:MM")
    return value


# ============================================================
# ENUMS
# ============================================================

class UserRole(str, Enum):
    tpo = "tpo"
    student = "student"
    alumni = "alumni"


class Branch(str, Enum):
    CS = "CS"
    MCA = "MCA"
    IT = "IT"
    ECE = "ECE"
    EEE = "EEE"
    MECH = "MECH"


class DriveStatus(str, Enum):
    active = "active"
    completed = "completed"


class ApplicationStatus(str, Enum):
    applied = "applied"
    shortlisted = "shortlisted"
    interview_scheduled = "interview_scheduled"
    selected = "selected"
    rejected = "rejected"


class StepState(str, Enum):
    completed = "completed"
    current = "current"
    pending = "pending"


# ============================================================
# USER RECORDS (tagged on role)
# ============================================================

class Project(CamelModel):
    title: str
    description: str
    technologies: List[str] = []


class UserBase(CamelModel):
    id: str
    email: str
    password: str
    name: str
    phone: Optional[str] = None


class StaffUser(UserBase):
    role: Literal["tpo"] = "tpo"


class StudentUser(UserBase):
    role: Literal["student"] = "student"
    roll_number: Optional[str] = None
    branch: Optional[Branch] = None
    cgpa: Optional[float] = Field(None, ge=0, le=10)
    backlogs: Optional[int] = Field(None, ge=0)
    year: Optional[int] = None
    skills: List[str] = []
    projects: List[Project] = []


class AlumniUser(UserBase):
    role: Literal["alumni"] = "alumni"
    company: Optional[str] = None
    position: Optional[str] = None
    graduation_year: Optional[int] = None
    branch: Optional[Branch] = None


User = Annotated[Union[StaffUser, StudentUser, AlumniUser], Field(discriminator="role")]


# ============================================================
# DRIVE / APPLICATION RECORDS
# ============================================================

class Drive(CamelModel):
    id: str
    company_name: str
    position: str
    package: str
    min_cgpa: float = Field(..., alias="minCGPA")
    max_backlogs: int
    eligible_branches: List[Branch] = Field(..., min_length=1)
    drive_date: Optional[date] = None
    application_deadline: Optional[date] = None
    description: str = ""
    requirements: List[str] = []
    status: DriveStatus = DriveStatus.active
    created_by: Optional[str] = None
    created_at: datetime


class Application(CamelModel):
    id: str
    student_id: str
    drive_id: str
    status: ApplicationStatus = ApplicationStatus.applied
    applied_at: datetime
    interview_slot: Optional[datetime] = None


# ============================================================
# ALUMNI RECORDS
# ============================================================

class Referral(CamelModel):
    id: str
    alumni_id: str
    company_name: str
    position: str
    package: str
    location: str
    description: str = ""
    requirements: List[str] = []
    posted_at: datetime
    applications_count: int = 0


class MentorshipSlot(CamelModel):
    id: str
    alumni_id: str
    title: str
    slot_date: date = Field(..., alias="date")
    time: str
    duration: int
    max_students: int
    booked_by: List[str] = []
    description: str = ""


# ============================================================
# AUTH SCHEMAS
# ============================================================

class RegisterRequest(CamelModel):
    email: EmailStr
    password: str = Field(..., min_length=1)
    role: UserRole
    name: str = Field(..., min_length=1)
    phone: Optional[str] = None
    # student signup
    roll_number: Optional[str] = None
    branch: Optional[Branch] = None
    cgpa: Optional[float] = Field(None, ge=0, le=10)
    year: Optional[int] = None
    # alumni signup
    company: Optional[str] = None
    position: Optional[str] = None
    graduation_year: Optional[int] = None


class LoginRequest(CamelModel):
    email: EmailStr
    password: str


class TokenResponse(CamelModel):
    access_token: str
    token_type: str = "bearer"
    user_id: str
    role: UserRole


# ============================================================
# PROFILE SCHEMAS
# ============================================================

class StudentProfileUpdate(CamelModel):
    """Only provided fields are updated. Role is not editable."""
    name: Optional[str] = Field(None, min_length=1)
    phone: Optional[str] = None
    roll_number: Optional[str] = None
    branch: Optional[Branch] = None
    cgpa: Optional[float] = Field(None, ge=0, le=10)
    backlogs: Optional[int] = Field(None, ge=0)
    year: Optional[int] = None

    @field_validator("name")
    @classmethod
    def name_not_null(cls, value):
        # an explicit null would blank the stored name
        if value is None:
            raise ValueError("name cannot be empty")
        return value


class SkillAdd(CamelModel):
    skill: str


class ProjectCreate(CamelModel):
    title: str = ""
    description: str = ""
    technologies: Union[List[str], str] = []

    @field_validator("technologies", mode="before")
    @classmethod
    def split_technologies(cls, value):
        if isinstance(value, str):
            return [t.strip() for t in value.split(",") if t.strip()]
        return value


class StudentResponse(CamelModel):
    id: str
    email: str
    name: str
    role: UserRole = UserRole.student
    phone: Optional[str] = None
    roll_number: Optional[str] = None
    branch: Optional[Branch] = None
    cgpa: Optional[float] = None
    backlogs: Optional[int] = None
    year: Optional[int] = None
    skills: List[str] = []
    projects: List[Project] = []


class UserResponse(CamelModel):
    id: str
    email: str
    name: str
    role: UserRole


# ============================================================
# DRIVE SCHEMAS
# ============================================================

class DriveCreate(CamelModel):
    """Required fields are checked by DriveService.create, not here."""
    company_name: str = ""
    position: str = ""
    package: str = ""
    min_cgpa: Optional[float] = Field(None, ge=0, le=10, alias="minCGPA")
    max_backlogs: Optional[int] = Field(None, ge=0)
    eligible_branches: List[Branch] = []
    drive_date: Optional[date] = None
    application_deadline: Optional[date] = None
    description: str = ""
    requirements: Union[List[str], str] = []

    @field_validator("requirements", mode="before")
    @classmethod
    def split_requirements(cls, value):
        return _split_lines(value)


class DraftCriteria(CamelModel):
    """Criteria being typed into the create-drive form. Unset means no limit."""
    min_cgpa: Optional[float] = Field(None, ge=0, le=10, alias="minCGPA")
    max_backlogs: Optional[int] = Field(None, ge=0)
    eligible_branches: List[Branch] = []


class DriveStatusUpdate(CamelModel):
    status: DriveStatus


class EligibleDriveView(Drive):
    """A drive on the student's eligible list, marked if already applied to."""
    applied: bool = False


class EligibilityPreview(CamelModel):
    eligible_count: int
    student_ids: List[str] = []


class NotificationReport(CamelModel):
    drive_id: str
    company_name: str
    eligible_count: int
    student_ids: List[str] = []
    message: str


# ============================================================
# APPLICATION SCHEMAS
# ============================================================

class ApplicationStatusUpdate(CamelModel):
    status: ApplicationStatus


class TimelineStep(CamelModel):
    status: ApplicationStatus
    state: StepState


class ApplicationView(CamelModel):
    """An application joined with its drive for the student tracker."""
    id: str
    drive_id: str
    company_name: str
    position: Optional[str] = None
    package: Optional[str] = None
    drive_date: Optional[date] = None
    status: ApplicationStatus
    applied_at: datetime
    interview_slot: Optional[datetime] = None
    timeline: List[TimelineStep] = []


class ApplicantView(CamelModel):
    """An application joined with its student for the TPO views."""
    id: str
    student_id: str
    student_name: str
    roll_number: Optional[str] = None
    branch: Optional[Branch] = None
    cgpa: Optional[float] = None
    status: ApplicationStatus
    applied_at: datetime
    interview_slot: Optional[datetime] = None


# ============================================================
# INTERVIEW SCHEMAS
# ============================================================

class GridSlot(CamelModel):
    time: str
    student_id: Optional[str] = None


class SlotAssignRequest(CamelModel):
    time: str
    student_id: str

    @field_validator("time")
    @classmethod
    def validate_time(cls, value):
        return _check_time(value)


class SlotConflict(CamelModel):
    time: str
    student_ids: List[str]


# ============================================================
# ALUMNI SCHEMAS
# ============================================================

class ReferralCreate(CamelModel):
    company_name: str = ""
    position: str = ""
    package: str = ""
    location: str = ""
    description: str = ""
    requirements: Union[List[str], str] = []

    @field_validator("requirements", mode="before")
    @classmethod
    def split_requirements(cls, value):
        return _split_lines(value)


class MentorshipSlotCreate(CamelModel):
    title: str = ""
    slot_date: Optional[date] = Field(None, alias="date")
    time: str = ""
    duration: Optional[int] = Field(None, gt=0)
    max_students: Optional[int] = Field(None, gt=0)
    description: str = ""

    @field_validator("time")
    @classmethod
    def validate_time(cls, value):
        return _check_time(value) if value else value


class MentorshipSlotView(MentorshipSlot):
    is_full: bool
    is_past: bool
    booked_names: List[str] = []


# ============================================================
# ANALYTICS SCHEMAS
# ============================================================

class CompanyApplications(CamelModel):
    company: str
    count: int


class PlacementAnalytics(CamelModel):
    total_students: int
    placed_students: int
    placement_rate: float
    branch_distribution: Dict[str, int]
    status_distribution: Dict[str, int]
    company_applications: List[CompanyApplications]
    cgpa_distribution: Dict[str, int]
    average_cgpa: float
    active_drives: int
    applications_per_student: float
    zero_backlog_students: int


class AlumniOverview(CamelModel):
    referrals_posted: int
    referral_applications: int
    mentorship_slots: int
    total_mentees: int


# ============================================================
# GENERIC SCHEMAS
# ============================================================

class MessageResponse(CamelModel):
    message: str
    success: bool = True
