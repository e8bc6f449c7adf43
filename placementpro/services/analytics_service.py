"""
Analytics Service - numbers for the TPO and alumni dashboards.

All figures are computed on the fly from the store; nothing is cached.
"""

from collections import Counter
from typing import Dict, List

import numpy as np

from placementpro.db.repository import (
    applications_repo,
    drives_repo,
    mentorship_repo,
    referrals_repo,
)
from placementpro.db.store import RecordStore
from placementpro.schemas.schemas import (
    AlumniOverview,
    ApplicationStatus,
    CompanyApplications,
    DriveStatus,
    PlacementAnalytics,
)
from placementpro.services.user_service import UserService

# Lower bounds, highest first
CGPA_BUCKETS = [
    ("9.0+", 9.0),
    ("8.0-8.9", 8.0),
    ("7.0-7.9", 7.0),
    ("6.0-6.9", 6.0),
    ("<6.0", 0.0),
]


def cgpa_distribution(cgpas: List[float]) -> Dict[str, int]:
    """Bucket counts. A missing CGPA counts as 0."""
    counts = {label: 0 for label, _ in CGPA_BUCKETS}
    if not cgpas:
        return counts
    # digitize against ascending edges: 0 -> <6.0, ..., 4 -> 9.0+
    edges = np.array([6.0, 7.0, 8.0, 9.0])
    indices = np.digitize(np.asarray(cgpas, dtype=float), edges)
    ascending = [label for label, _ in reversed(CGPA_BUCKETS)]
    for idx in indices:
        counts[ascending[int(idx)]] += 1
    return counts


class AnalyticsService:

    def __init__(self, store: RecordStore):
        self.user_service = UserService(store)
        self.drives = drives_repo(store)
        self.applications = applications_repo(store)
        self.referrals = referrals_repo(store)
        self.slots = mentorship_repo(store)

    def placement_analytics(self) -> PlacementAnalytics:
        students = self.user_service.list_students()
        drives = self.drives.all()
        applications = self.applications.all()

        total_students = len(students)
        placed = sum(1 for a in applications if a.status == ApplicationStatus.selected)
        cgpas = [s.cgpa or 0.0 for s in students]

        branch_distribution = Counter(
            s.branch.value if s.branch else "Other" for s in students
        )
        status_distribution = Counter(a.status.value for a in applications)

        per_company = [
            CompanyApplications(
                company=d.company_name,
                count=sum(1 for a in applications if a.drive_id == d.id)
            )
            for d in drives
        ]
        per_company.sort(key=lambda c: c.count, reverse=True)

        return PlacementAnalytics(
            total_students=total_students,
            placed_students=placed,
            placement_rate=round(placed / total_students * 100, 1) if total_students else 0.0,
            branch_distribution=dict(branch_distribution),
            status_distribution=dict(status_distribution),
            company_applications=per_company,
            cgpa_distribution=cgpa_distribution(cgpas),
            average_cgpa=round(float(np.mean(cgpas)), 2) if cgpas else 0.0,
            active_drives=sum(1 for d in drives if d.status == DriveStatus.active),
            applications_per_student=(
                round(len(applications) / total_students, 1) if total_students else 0.0
            ),
            zero_backlog_students=sum(1 for s in students if s.backlogs == 0),
        )

    def alumni_overview(self, alumni_id: str) -> AlumniOverview:
        referrals = self.referrals.find(lambda r: r.alumni_id == alumni_id)
        slots = self.slots.find(lambda s: s.alumni_id == alumni_id)
        return AlumniOverview(
            referrals_posted=len(referrals),
            referral_applications=sum(r.applications_count for r in referrals),
            mentorship_slots=len(slots),
            total_mentees=sum(len(s.booked_by) for s in slots),
        )
