"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_CHILDREN = (
    ("child-a", "Child A"),
    ("child-b", "Child B"),
    ("child-c", "Child C"),
)

DEFAULT_SUBJECTS = (
    ("math", "Math"),
    ("reading", "Reading"),
    ("writing", "Writing"),
    ("science", "Science"),
    ("history", "History"),
    ("bible", "Bible"),
    ("elective", "Elective"),
    ("pe", "PE"),
)

# School year runs from START (current year) to END (following year).
SCHOOL_YEAR_START_MONTH = 9
SCHOOL_YEAR_START_DAY = 1
SCHOOL_YEAR_END_MONTH = 6
SCHOOL_YEAR_END_DAY = 30

SCHOOL_YEAR_KEY = "current"

CHILD_ID_PREFIX = "child"
SUBJECT_ID_PREFIX = "subject"

DEFAULT_REPORT_DAYS = 30
