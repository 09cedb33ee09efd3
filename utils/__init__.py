# Utility modules for the Recipe API
from .errors import (
    APIError, ValidationError, AuthenticationError, NotFoundError, ConflictError,
    RecipeAPIError, QuotaExceededError, ImageValidationError, ImageUploadError,
)
from .auth import authenticate_request, require_auth, current_user_id, verify_token
from .image_handler import decode_base64_image, validate_and_process_image
from .sanitizer import sanitize_text, sanitize_name, sanitize_url
