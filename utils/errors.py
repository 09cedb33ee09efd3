"""
API Error Types

Handlers raise these instead of building error responses themselves.
The app factory registers one error handler that turns any APIError into
a JSON body of the form {"error": ..., "message": ...}.
"""


class APIError(Exception):
    """Base class for errors that map onto an HTTP status."""

    status_code = 500
    error = 'Internal server error'

    def __init__(self, error=None, message=None, status_code=None):
        super().__init__(message or error or self.error)
        if error is not None:
            self.error = error
        if status_code is not None:
            self.status_code = status_code
        self.message = message

    def to_dict(self):
        body = {'error': self.error}
        if self.message:
            body['message'] = self.message
        return body


class ValidationError(APIError):
    """Missing or malformed request field."""
    status_code = 400
    error = 'Invalid request'


class AuthenticationError(APIError):
    """No usable identity on the request."""
    status_code = 401
    error = 'User not authenticated'

    def __init__(self, message='Authentication required'):
        super().__init__(message=message)


class NotFoundError(APIError):
    """Record is absent or belongs to another user. The two are indistinguishable."""
    status_code = 404
    error = 'Not found'


class ConflictError(APIError):
    """Uniqueness violation."""
    status_code = 409
    error = 'Conflict'


class RecipeAPIError(APIError):
    """Spoonacular request failed."""
    status_code = 500
    error = 'Recipe API request failed'

    def __init__(self, message, upstream_status=None):
        super().__init__(message=message)
        self.upstream_status = upstream_status


class QuotaExceededError(RecipeAPIError):
    """Spoonacular usage allowance exhausted on every configured key."""
    status_code = 402
    error = 'Recipe API limit reached'


class ImageValidationError(APIError):
    """Raised when an image fails validation."""
    status_code = 400
    error = 'Invalid image'

    def __init__(self, message):
        super().__init__(message=message)


class ImageUploadError(APIError):
    """Raised when the image host rejects or cannot receive an upload."""
    status_code = 500
    error = 'Image upload failed'

    def __init__(self, message):
        super().__init__(message=message)
