"""
Eligibility Rules

A student qualifies for a drive when all three checks pass:
- cgpa >= minCGPA
- backlogs <= maxBacklogs
- branch in eligibleBranches

A student with no cgpa, backlogs or branch on file fails that check; there is
no default that lets an incomplete profile through.

The same predicate powers the TPO criteria preview, the student's drive
list and the notification trigger.
"""

from typing import Iterable, List, NamedTuple, Optional, Sequence

from placementpro.schemas.schemas import (
    Branch,
    DraftCriteria,
    Drive,
    DriveStatus,
    StudentUser,
)

# Draft criteria with no backlog limit typed yet
UNLIMITED_BACKLOGS = 999


class Criteria(NamedTuple):
    min_cgpa: float
    max_backlogs: int
    eligible_branches: Sequence[Branch]
    any_branch: bool = False


class EligibilityResult(NamedTuple):
    eligible: bool
    failed_checks: List[str]


def criteria_for_drive(drive: Drive) -> Criteria:
    return Criteria(drive.min_cgpa, drive.max_backlogs, drive.eligible_branches)


def criteria_for_draft(draft: DraftCriteria) -> Criteria:
    """
    Criteria for a drive that has not been created yet.
    Unset CGPA means 0, unset backlogs means no limit, no branches means any.
    """
    return Criteria(
        min_cgpa=draft.min_cgpa if draft.min_cgpa is not None else 0.0,
        max_backlogs=draft.max_backlogs if draft.max_backlogs is not None else UNLIMITED_BACKLOGS,
        eligible_branches=draft.eligible_branches,
        any_branch=not draft.eligible_branches,
    )


def check_eligibility(student: StudentUser, criteria: Criteria) -> EligibilityResult:
    """Run every check and report the ones that failed."""
    failed = []
    if student.cgpa is None or student.cgpa < criteria.min_cgpa:
        failed.append("cgpa")
    if student.backlogs is None or student.backlogs > criteria.max_backlogs:
        failed.append("backlogs")
    if student.branch is None or not (
        criteria.any_branch or student.branch in criteria.eligible_branches
    ):
        failed.append("branch")
    return EligibilityResult(eligible=not failed, failed_checks=failed)


def is_eligible(student: StudentUser, drive: Drive) -> bool:
    return check_eligibility(student, criteria_for_drive(drive)).eligible


def eligible_students(
    students: Iterable[StudentUser],
    criteria: Criteria
) -> List[StudentUser]:
    """Filter a population, keeping store order."""
    return [s for s in students if check_eligibility(s, criteria).eligible]


def eligible_drives(
    student: StudentUser,
    drives: Iterable[Drive],
    status: Optional[DriveStatus] = DriveStatus.active
) -> List[Drive]:
    """Drives a student can see on their dashboard: active and eligible."""
    return [
        d for d in drives
        if (status is None or d.status == status) and is_eligible(student, d)
    ]
