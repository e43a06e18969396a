"""
Error taxonomy for the content dashboard.

Every failure path ends in one of these types; the Flask handlers in
``dashboard.errors`` turn them into JSON responses. Nothing here is retried.
"""


class DashboardError(Exception):
    """Base exception for all dashboard errors."""
    pass


class ConfigurationError(DashboardError):
    """Raised when a collaborator is missing required settings."""
    pass


class AuthenticationError(DashboardError):
    """Raised when signing in, signing up or resolving a session fails."""
    pass


class ValidationFailed(DashboardError):
    """Raised when a submitted document does not pass its validator.

    ``errors`` maps dotted field paths to messages.
    """

    def __init__(self, errors, message="Validation failed"):
        super().__init__(message)
        self.errors = dict(errors)


# =============================================================================
# Remote call errors
# =============================================================================

class RemoteCallError(DashboardError):
    """Base exception for failed calls to a hosted collaborator."""
    pass


class DocumentStoreError(RemoteCallError):
    """Raised when the document store rejects a call."""
    pass


class DocumentNotFound(DocumentStoreError):
    """Raised when a document id does not exist in its collection."""

    def __init__(self, collection, document_id):
        super().__init__(f"{collection} record {document_id} not found")
        self.collection = collection
        self.document_id = document_id


class UploadError(RemoteCallError):
    """Raised when the object store rejects an upload."""
    pass
