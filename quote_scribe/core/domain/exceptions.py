# quote_scribe/core/domain/exceptions.py
class DomainError(Exception):
    """Base class for all domain-level exceptions."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)

# --- Validation Errors ---

class EntityValidationError(DomainError):
    """Raised before reaching the store when user input is unusable."""

class EmptyTextError(EntityValidationError):
    """Raised when a quote or reflection body is empty after trimming."""
    def __init__(self, entity: str):
        super().__init__(f"Please enter a {entity}.")

class MissingQuoteReferenceError(EntityValidationError):
    """Raised when a reflection is submitted without selecting a quote."""
    def __init__(self):
        super().__init__("Please select a quote to reflect on.")

class InvalidCredentialFormatError(EntityValidationError):
    """Raised when a credential does not look like an OpenRouter key."""
    def __init__(self):
        super().__init__("Please enter a valid OpenRouter API key (starts with sk-or-).")

# --- Entity Not Found Errors ---

class QuoteNotFoundError(DomainError):
    """Raised when an operation names a quote id that is not stored."""
    def __init__(self, quote_id: str):
        self.quote_id = quote_id
        super().__init__(f"Quote '{quote_id}' not found.")

class ReflectionNotFoundError(DomainError):
    """Raised when an operation names a reflection id that is not stored."""
    def __init__(self, reflection_id: str):
        self.reflection_id = reflection_id
        super().__init__(f"Reflection '{reflection_id}' not found.")

# --- Storage Errors ---

class StorageWriteError(DomainError):
    """
    Raised by use cases when the store reported a failed write.
    The store itself never raises; it returns False and the controller
    turns that into something the user can see.
    """
    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"Could not save changes ({operation}). Local storage may be full or unavailable.")

# --- External Service Errors (Generation Client) ---

class GenerationError(DomainError):
    """Base class for failures of the remote text-generation service."""
    user_message = "An error occurred while generating the quote. Please try again."

class MissingCredentialError(GenerationError):
    user_message = "Please set your OpenRouter API key in Settings."
    def __init__(self, message: str = "API key not configured"):
        super().__init__(message)

class AuthenticationError(GenerationError):
    user_message = "Invalid API key. Please check your OpenRouter API key in settings."

class InsufficientCreditsError(GenerationError):
    user_message = "Insufficient credits. Please check your OpenRouter account."

class RateLimitError(GenerationError):
    user_message = "Rate limit exceeded. Please try again later."

class NetworkError(GenerationError):
    user_message = "Network error. Please check your internet connection."

class UpstreamServiceError(GenerationError):
    """Non-2xx answer that is not one of the categorized statuses."""
    def __init__(self, message: str, status_code: int):
        self.status_code = status_code
        super().__init__(message)

class EmptyResponseError(GenerationError):
    user_message = "No quote generated - the service returned an empty response."
