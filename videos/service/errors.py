"""
Error taxonomy for the API.

Client errors carry a message that is safe to return verbatim. Media and
storage errors are server errors: their ``detail`` (tool output, backend
messages) is logged but never sent to the client.
"""


class ApiError(Exception):
    """Base class for errors that map to an HTTP status"""
    status_code = 500
    public_message = 'Internal server error'

    def __init__(self, message=None, detail=''):
        super().__init__(message or self.public_message)
        self.message = message or self.public_message
        self.detail = detail

    @property
    def is_server_error(self):
        return self.status_code >= 500


class BadRequest(ApiError):
    status_code = 400
    public_message = 'Bad request'


class Unauthenticated(ApiError):
    status_code = 401
    public_message = "Couldn't validate JWT"


class Forbidden(ApiError):
    status_code = 403
    public_message = 'User not authorized'


class NotFound(ApiError):
    status_code = 404
    public_message = 'Not found'


class MediaProcessingError(ApiError):
    """Server-side failure while handling an accepted upload"""


class MediaInspectionError(MediaProcessingError):
    public_message = 'Failed to inspect video'


class MediaRepackagingError(MediaProcessingError):
    public_message = 'Failed to process video'


class UploadError(MediaProcessingError):
    public_message = 'Failed to store video'
