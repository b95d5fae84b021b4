"""Constants and defaults.

Note: Keep constants here to avoid magic values spread across code.
"""

# Plaksha University campus, (latitude, longitude)
DEFAULT_CAMPUS_POLYGON = (
    (30.6312807, 76.7272162),
    (30.6334221, 76.7250286),
    (30.6317419, 76.7215720),
    (30.6289446, 76.7234467),
)
DEFAULT_UNIVERSITY_NAME = "Plaksha University"
DEFAULT_EMAIL_SUFFIX = ".edu.in"

BIOMETRIC_REASON = "Scan your face or finger to mark attendance"

EXPORT_HEADER = ("Student Name", "Student ID", "Email", "Attendance Date", "Time")
ATTENDANCE_FILE_NAME = "Student Attendance.csv"
SNAPSHOT_FILE_TEMPLATE = "attendance_{epoch}.csv"
EXPORT_DATETIME_FORMAT = "%b %d, %Y at %I:%M %p"

TUNNEL_INTERFACE_MARKERS = ("tap", "tun", "ppp", "ipsec")

REMINDER_IDENTIFIER = "attendanceReminder"
REMINDER_TITLE = "Time for Attendance!"
REMINDER_BODY = "Click here to mark your attendance"
DEFAULT_REMINDER_START = "10:00"
DEFAULT_REMINDER_END = "12:00"
