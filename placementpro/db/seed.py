"""
Demo data - the sample TPO, students, alumni, drives, applications,
referrals and mentorship slots loaded on first start.

seed_demo_data() is a no-op once the dataInitialized flag is set.
"""
import logging
from datetime import datetime

from placementpro.db.store import COLLECTIONS, DATA_INITIALIZED_FLAG, RecordStore

logger = logging.getLogger(__name__)


def _users() -> list:
    return [
        {
            "id": "tpo1", "email": "tpo@college.edu", "password": "tpo123",
            "role": "tpo", "name": "Dr. Rajesh Kumar", "phone": "+91-9876543210"
        },
        {
            "id": "std1", "email": "student1@college.edu", "password": "student123",
            "role": "student", "name": "Priya Sharma", "rollNumber": "MCA2023001",
            "branch": "MCA", "cgpa": 8.5, "backlogs": 0, "phone": "+91-9876543211", "year": 2,
            "skills": ["React", "Node.js", "Python", "SQL", "MongoDB"],
            "projects": [
                {
                    "title": "E-Commerce Platform",
                    "description": "Built a full-stack e-commerce application with payment integration",
                    "technologies": ["React", "Node.js", "MongoDB", "Stripe"]
                },
                {
                    "title": "Machine Learning Model",
                    "description": "Developed a sentiment analysis model using NLP",
                    "technologies": ["Python", "TensorFlow", "NLTK"]
                }
            ]
        },
        {
            "id": "std2", "email": "student2@college.edu", "password": "student123",
            "role": "student", "name": "Arjun Patel", "rollNumber": "MCA2023002",
            "branch": "MCA", "cgpa": 7.8, "backlogs": 0, "phone": "+91-9876543212", "year": 2,
            "skills": ["Java", "Spring Boot", "MySQL", "AWS"],
            "projects": [
                {
                    "title": "Hospital Management System",
                    "description": "Created a comprehensive system for managing hospital operations",
                    "technologies": ["Java", "Spring Boot", "MySQL", "Angular"]
                }
            ]
        },
        {
            "id": "std3", "email": "student3@college.edu", "password": "student123",
            "role": "student", "name": "Sneha Reddy", "rollNumber": "CS2023001",
            "branch": "CS", "cgpa": 9.1, "backlogs": 0, "phone": "+91-9876543213", "year": 4,
            "skills": ["Python", "Django", "React", "PostgreSQL", "Docker", "PowerBI"],
            "projects": [
                {
                    "title": "Data Analytics Dashboard",
                    "description": "Built an interactive dashboard for business intelligence",
                    "technologies": ["Python", "Django", "React", "PowerBI", "PostgreSQL"]
                }
            ]
        },
        {
            "id": "std4", "email": "student4@college.edu", "password": "student123",
            "role": "student", "name": "Rahul Singh", "rollNumber": "MCA2023003",
            "branch": "MCA", "cgpa": 6.5, "backlogs": 1, "phone": "+91-9876543214", "year": 2,
            "skills": ["JavaScript", "React", "HTML", "CSS"],
            "projects": []
        },
        {
            "id": "alum1", "email": "alumni1@gmail.com", "password": "alumni123",
            "role": "alumni", "name": "Vikram Malhotra", "company": "Google",
            "position": "Senior Software Engineer", "graduationYear": 2019,
            "branch": "CS", "phone": "+91-9876543215"
        },
        {
            "id": "alum2", "email": "alumni2@gmail.com", "password": "alumni123",
            "role": "alumni", "name": "Ananya Iyer", "company": "Microsoft",
            "position": "Product Manager", "graduationYear": 2020,
            "branch": "MCA", "phone": "+91-9876543216"
        },
    ]


def _drives(now: str) -> list:
    return [
        {
            "id": "drive1", "companyName": "TCS Digital", "position": "System Engineer",
            "package": "7.5 LPA", "minCGPA": 7.0, "maxBacklogs": 0,
            "eligibleBranches": ["CS", "MCA"],
            "driveDate": "2026-03-15", "applicationDeadline": "2026-03-01",
            "description": "TCS is hiring for System Engineer role in Digital division",
            "requirements": ["Good programming skills", "Problem solving ability", "Communication skills"],
            "status": "active", "createdBy": "tpo1", "createdAt": now
        },
        {
            "id": "drive2", "companyName": "Infosys", "position": "Software Developer",
            "package": "6.5 LPA", "minCGPA": 6.5, "maxBacklogs": 1,
            "eligibleBranches": ["CS", "MCA", "IT"],
            "driveDate": "2026-03-20", "applicationDeadline": "2026-03-05",
            "description": "Infosys is looking for talented software developers",
            "requirements": ["Java or Python", "Database knowledge", "Team player"],
            "status": "active", "createdBy": "tpo1", "createdAt": now
        },
        {
            "id": "drive3", "companyName": "Amazon", "position": "SDE-1",
            "package": "28 LPA", "minCGPA": 8.0, "maxBacklogs": 0,
            "eligibleBranches": ["CS", "MCA"],
            "driveDate": "2026-04-10", "applicationDeadline": "2026-03-25",
            "description": "Amazon is hiring for Software Development Engineer role",
            "requirements": ["Strong DSA skills", "System Design knowledge", "At least 2 projects"],
            "status": "active", "createdBy": "tpo1", "createdAt": now
        },
    ]


def _applications(now: str) -> list:
    return [
        {"id": "app1", "studentId": "std1", "driveId": "drive1", "status": "applied",
         "appliedAt": now, "interviewSlot": None},
        {"id": "app2", "studentId": "std1", "driveId": "drive3", "status": "shortlisted",
         "appliedAt": now, "interviewSlot": "2026-04-10T10:00:00"},
        {"id": "app3", "studentId": "std2", "driveId": "drive1", "status": "applied",
         "appliedAt": now, "interviewSlot": None},
        {"id": "app4", "studentId": "std3", "driveId": "drive3", "status": "interview_scheduled",
         "appliedAt": now, "interviewSlot": "2026-04-10T11:00:00"},
    ]


def _referrals(now: str) -> list:
    return [
        {
            "id": "ref1", "alumniId": "alum1", "companyName": "Google",
            "position": "Software Engineer", "package": "35 LPA", "location": "Bangalore",
            "description": "Looking for talented engineers to join our Cloud team",
            "requirements": ["3+ years experience", "Strong in Java/Python", "System Design"],
            "postedAt": now, "applicationsCount": 5
        },
        {
            "id": "ref2", "alumniId": "alum2", "companyName": "Microsoft",
            "position": "Product Manager", "package": "32 LPA", "location": "Hyderabad",
            "description": "PM role for Office365 team",
            "requirements": ["MBA or equivalent", "Technical background", "Leadership skills"],
            "postedAt": now, "applicationsCount": 3
        },
    ]


def _mentorship_slots() -> list:
    return [
        {
            "id": "mentor1", "alumniId": "alum1", "title": "Mock Interview - DSA Focus",
            "date": "2026-02-25", "time": "18:00", "duration": 60, "maxStudents": 5,
            "bookedBy": ["std1", "std3"],
            "description": "Practice coding interviews with focus on Data Structures"
        },
        {
            "id": "mentor2", "alumniId": "alum2", "title": "Career Guidance Session",
            "date": "2026-02-27", "time": "19:00", "duration": 45, "maxStudents": 10,
            "bookedBy": ["std2"],
            "description": "General career advice and resume review"
        },
    ]


def seed_demo_data(store: RecordStore) -> bool:
    """
    Load the sample data unless it has been loaded before.
    Returns True if data was written.
    """
    if store.get_flag(DATA_INITIALIZED_FLAG):
        return False

    now = datetime.utcnow().isoformat()
    store.save(COLLECTIONS["users"], _users())
    store.save(COLLECTIONS["drives"], _drives(now))
    store.save(COLLECTIONS["applications"], _applications(now))
    store.save(COLLECTIONS["referrals"], _referrals(now))
    store.save(COLLECTIONS["mentorship_slots"], _mentorship_slots())
    store.set_flag(DATA_INITIALIZED_FLAG)

    logger.info("Demo data seeded")
    return True
