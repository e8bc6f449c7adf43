"""
PlacementPro - Campus Placement Portal
Drive eligibility, application tracking and interview scheduling.

Architecture:
- Record store: whole collections of JSON records (in-memory or MongoDB)
- Services: eligibility rules, application state machine, interview slots
- FastAPI: thin HTTP surface for the TPO, student and alumni dashboards
"""

__version__ = "1.0.0"
