import os

# SQLite for simplicity, any SQLAlchemy URL works (e.g. PostgreSQL in production)
DATABASE_URL = os.getenv('DATABASE_URL', 'sqlite:///./submissions.db')

# Most recent submissions shown on the listing page
SUBMISSIONS_LIMIT = int(os.getenv('SUBMISSIONS_LIMIT', '50'))

LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()

PAGE_TITLE = "HotFX Form Hole"
