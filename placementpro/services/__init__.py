"""
Services module - business logic over the record store.

Core:
- eligibility_service: drive criteria checks
- application_service: application lifecycle state machine
- scheduling_service: interview day slot grid
- notification_service: eligible-set reporting

Around the core:
- drive_service, user_service, referral_service, mentorship_service,
  analytics_service
"""
