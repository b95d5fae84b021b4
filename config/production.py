import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

EXPORT_DIR = os.getenv("EXPORT_DIR", "exports")
INSTITUTION_EMAIL_SUFFIX = os.getenv("INSTITUTION_EMAIL_SUFFIX", ".edu.in")

BIOMETRIC_AVAILABLE = bool(int(os.getenv("BIOMETRIC_AVAILABLE", "0")))
BIOMETRIC_AUTO_APPROVE = bool(int(os.getenv("BIOMETRIC_AUTO_APPROVE", "0")))

INITIAL_LOCATION_STATE = os.getenv("INITIAL_LOCATION_STATE", "notDetermined")

REMINDER_START = os.getenv("REMINDER_START", "10:00")
REMINDER_END = os.getenv("REMINDER_END", "12:00")
