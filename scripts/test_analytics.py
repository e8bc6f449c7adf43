"""
Analytics Tests

Tests:
1. CGPA bucketing
2. Placement dashboard on the demo data
3. Alumni contribution summary
"""
import pytest

from placementpro.schemas.schemas import ApplicationStatus
from placementpro.services.analytics_service import AnalyticsService, cgpa_distribution
from placementpro.services.application_service import ApplicationService


def test_cgpa_buckets_edges():
    counts = cgpa_distribution([5.9, 6.0, 7.99, 8.0, 9.0, 10.0])
    assert counts == {"9.0+": 2, "8.0-8.9": 1, "7.0-7.9": 1, "6.0-6.9": 1, "<6.0": 1}


def test_cgpa_buckets_empty():
    assert sum(cgpa_distribution([]).values()) == 0


def test_placement_analytics_on_demo_data(store):
    stats = AnalyticsService(store).placement_analytics()
    assert stats.total_students == 4
    assert stats.placed_students == 0
    assert stats.placement_rate == 0.0
    assert stats.branch_distribution == {"MCA": 3, "CS": 1}
    assert stats.status_distribution == {"applied": 2, "shortlisted": 1, "interview_scheduled": 1}
    assert stats.average_cgpa == pytest.approx(7.975, abs=0.01)
    assert stats.active_drives == 3
    assert stats.zero_backlog_students == 3
    assert stats.applications_per_student == 1.0
    assert [c.company for c in stats.company_applications] == ["TCS Digital", "Amazon", "Infosys"]


def test_placement_rate_after_selection(store):
    ApplicationService(store).update_status("app4", ApplicationStatus.selected)
    stats = AnalyticsService(store).placement_analytics()
    assert stats.placed_students == 1
    assert stats.placement_rate == 25.0


def test_empty_store(empty_store):
    stats = AnalyticsService(empty_store).placement_analytics()
    assert stats.total_students == 0
    assert stats.placement_rate == 0.0
    assert stats.average_cgpa == 0.0


def test_alumni_overview(store):
    overview = AnalyticsService(store).alumni_overview("alum1")
    assert overview.referrals_posted == 1
    assert overview.referral_applications == 5
    assert overview.mentorship_slots == 1
    assert overview.total_mentees == 2
