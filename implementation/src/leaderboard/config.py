import os

class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or 'sqlite:///scores.db'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    # Leaderboard page size when the caller gives no limit, and the hard cap otherwise
    SCORES_DEFAULT_LIMIT = int(os.environ.get('SCORES_DEFAULT_LIMIT', '20'))
    SCORES_MAX_LIMIT = int(os.environ.get('SCORES_MAX_LIMIT', '100'))
    # Comma-separated origins allowed to call the API from a browser
    CORS_ORIGINS = [o for o in os.environ.get('CORS_ORIGINS', '*').split(',') if o]
