"""
Service-wide constants
"""

SERVICE_NAME = "ksa-hrms-backend"

# URL prefix under which UPLOAD_DIR is served
UPLOADS_URL_PREFIX = "/uploads"
AVATARS_SUBDIR = "avatars"
