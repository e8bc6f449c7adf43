"""
Schemas module - stored record shapes and API request/response bodies.

Records (User, Drive, Application, Referral, MentorshipSlot) are what the
record store holds; everything else is API contract.
"""
