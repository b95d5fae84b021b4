"""Campus attendance package.

Organized by feature modules (geofence, network, location, biometric, students,
attendance, reminders). Controllers stay thin; the eligibility pipeline and the
ledger live in the service layer and are wired together in ``container.py``.
"""
