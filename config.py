"""Configuration for the FNOL Claims Intake Agent."""
import os
from dotenv import load_dotenv

load_dotenv()

BASE_DIR = os.path.dirname(os.path.abspath(__file__))

class Config:
    SECRET_KEY = os.getenv('SECRET_KEY', 'fnol-agent-secret-key')
    UPLOAD_FOLDER = os.path.join(BASE_DIR, 'uploads')
    SAMPLE_FOLDER = os.path.join(BASE_DIR, 'sample_fnol')
    ALLOWED_EXTENSIONS = {'pdf', 'txt'}
    MAX_CONTENT_LENGTH = 16 * 1024 * 1024  # 16MB max upload
    FAST_TRACK_THRESHOLD = 25000  # $25,000
    CURRENCY_SYMBOL = '$'
    HOST = os.getenv('HOST', '0.0.0.0')
    PORT = int(os.getenv('PORT', '5000'))
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()
