import os


DB_PATH = os.getenv('DB_PATH', 'quiz_app.db')
LOG_FILE = os.getenv('LOG_FILE', 'app.log')
LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')

# Created on first run when no account named admin exists. Change the password after the first login.
DEFAULT_ADMIN_USERNAME = 'admin'
DEFAULT_ADMIN_EMAIL = 'admin@quizapp.com'
DEFAULT_ADMIN_PASSWORD = 'admin123'
