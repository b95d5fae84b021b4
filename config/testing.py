import os

SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

EXPORT_DIR = os.getenv("EXPORT_DIR", "test-exports")
INSTITUTION_EMAIL_SUFFIX = ".edu.in"

CAMPUS_POLYGON = ((0.0, 0.0), (0.0, 10.0), (10.0, 10.0), (10.0, 0.0))

BIOMETRIC_AVAILABLE = True
BIOMETRIC_AUTO_APPROVE = True

INITIAL_LOCATION_STATE = "notDetermined"

REMINDER_START = "10:00"
REMINDER_END = "12:00"
