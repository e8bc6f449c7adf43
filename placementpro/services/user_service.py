"""
User Service - registration, login and student profile edits.

Passwords are stored and compared as plain text; this portal has no
security model beyond telling users apart.

There is one physical copy of each profile (the users collection). The
logged-in session only carries the user id, so an edit saved here is what
the next request sees.
"""

import logging
from typing import List, Optional

from pydantic import ValidationError as PydanticValidationError

from placementpro.core.exceptions import (
    AuthenticationError,
    NotFoundError,
    ValidationError,
)
from placementpro.db.repository import new_id, users_repo
from placementpro.db.store import RecordStore
from placementpro.schemas.schemas import (
    AlumniUser,
    Project,
    ProjectCreate,
    RegisterRequest,
    StaffUser,
    StudentProfileUpdate,
    StudentUser,
    UserRole,
)

logger = logging.getLogger(__name__)


class UserService:

    def __init__(self, store: RecordStore):
        self.users = users_repo(store)

    # --------------------------------------------------------
    # Lookups
    # --------------------------------------------------------

    def get(self, user_id: str):
        user = self.users.get(user_id)
        if user is None:
            raise NotFoundError("User", user_id)
        return user

    def get_student(self, student_id: str) -> StudentUser:
        user = self.users.get(student_id)
        if not isinstance(user, StudentUser):
            raise NotFoundError("Student", student_id)
        return user

    def find_student(self, student_id: str) -> Optional[StudentUser]:
        """Lenient lookup for joined views: None instead of NotFoundError."""
        user = self.users.get(student_id)
        return user if isinstance(user, StudentUser) else None

    def find_by_email(self, email: str):
        return self.users.find_one(lambda u: u.email.lower() == email.lower())

    def list_students(self) -> List[StudentUser]:
        return [u for u in self.users.all() if isinstance(u, StudentUser)]

    def name_of(self, user_id: str, default: str = "Unknown") -> str:
        user = self.users.get(user_id)
        return user.name if user else default

    # --------------------------------------------------------
    # Registration / login
    # --------------------------------------------------------

    def register(self, request: RegisterRequest):
        """
        Create an account. Students start with no backlogs and empty
        skills/projects; alumni carry their employer details.
        """
        if self.find_by_email(request.email):
            raise ValidationError("User with this email already exists")

        common = {
            "id": new_id(request.role.value),
            "email": request.email,
            "password": request.password,
            "name": request.name,
            "phone": request.phone,
        }
        if request.role == UserRole.student:
            user = StudentUser(
                **common,
                roll_number=request.roll_number,
                branch=request.branch,
                cgpa=request.cgpa,
                backlogs=0,
                year=request.year,
            )
        elif request.role == UserRole.alumni:
            user = AlumniUser(
                **common,
                company=request.company,
                position=request.position,
                graduation_year=request.graduation_year,
                branch=request.branch,
            )
        else:
            user = StaffUser(**common)

        self.users.add(user)
        logger.info("Registered %s %s", user.role, user.id)
        return user

    def authenticate(self, email: str, password: str):
        user = self.find_by_email(email)
        if user is None or user.password != password:
            raise AuthenticationError("Invalid email or password")
        return user

    # --------------------------------------------------------
    # Student profile
    # --------------------------------------------------------

    def update_profile(self, student_id: str, update: StudentProfileUpdate) -> StudentUser:
        """Apply provided fields only. Role is never part of an update."""
        student = self.get_student(student_id)
        changes = update.model_dump(exclude_unset=True)
        if not changes:
            raise ValidationError("No fields to update")
        # re-validate the merged record so nothing invalid reaches the store
        try:
            student = StudentUser.model_validate({**student.model_dump(), **changes})
        except PydanticValidationError as e:
            raise ValidationError(f"Invalid profile update: {e.errors()[0]['msg']}")
        self.users.replace(student)
        return student

    def add_skill(self, student_id: str, skill: str) -> StudentUser:
        skill = skill.strip()
        if not skill:
            raise ValidationError("Skill cannot be empty")
        student = self.get_student(student_id)
        if skill not in student.skills:
            student.skills.append(skill)
            self.users.replace(student)
        return student

    def remove_skill(self, student_id: str, skill: str) -> StudentUser:
        student = self.get_student(student_id)
        student.skills = [s for s in student.skills if s != skill]
        self.users.replace(student)
        return student

    def add_project(self, student_id: str, project: ProjectCreate) -> StudentUser:
        if not project.title.strip() or not project.description.strip():
            raise ValidationError("Please fill all project fields")
        student = self.get_student(student_id)
        student.projects.append(Project(
            title=project.title.strip(),
            description=project.description.strip(),
            technologies=project.technologies,
        ))
        self.users.replace(student)
        return student

    def remove_project(self, student_id: str, index: int) -> StudentUser:
        student = self.get_student(student_id)
        if index < 0 or index >= len(student.projects):
            raise NotFoundError("Project", str(index))
        del student.projects[index]
        self.users.replace(student)
        return student
