"""프로필 파이프라인 상수

README 센티넬 값과 화면 표시용 대체 문구
"""

README_CANONICAL_PATH = "README.md"
README_FALLBACK_PATH = "readme.md"

README_NOT_AVAILABLE = "No README available"
README_FETCH_ERROR = "Error fetching README"

PDF_MIME_TYPE = "application/pdf"
IMAGE_MIME_PREFIX = "image/"

PAGE_SEPARATOR = "\n"
RESUME_TEXT_SEPARATOR = "\n\n"

COMPLETION_SECTIONS = ("skills", "experience", "education", "projects", "interests")
SUMMARY_MIN_LENGTH = 20

FALLBACK_NAME = "Name Not Available"
FALLBACK_TITLE = "Title Not Available"
FALLBACK_SUMMARY = "No summary available."
FALLBACK_PERIOD = "Not specified"
FALLBACK_DESCRIPTION = "No description available."
FALLBACK_INITIAL = "?"

SECTION_PLACEHOLDERS = {
    "skills": "No skills listed.",
    "experience": "No experience listed.",
    "education": "No education listed.",
    "projects": "No projects listed.",
    "interests": "No interests listed.",
    "recommendations": "No recommendations available.",
    "technologies": "No technologies listed.",
    "targetSalary": "No salary target provided.",
    "newProjects": "No new project recommendations provided.",
    "newGoals": "No new career goals provided.",
    "newIdeas": "No new innovative ideas provided.",
    "newRoles": "No new role suggestions provided.",
    "newLifePaths": "No new life path suggestions provided.",
}
