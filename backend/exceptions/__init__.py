from typing import Optional, Dict, Any

class TruthBeaconException(Exception):
    status_code: int = 500
    public_message: str = "Internal server error"

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "details": self.details
        }

class BadRequestException(TruthBeaconException):
    status_code = 400
    public_message = "Missing or invalid prompt"

    def __init__(self, reason: str):
        super().__init__(
            f"Bad request: {reason}",
            {"reason": reason}
        )

class UpstreamInvalidException(TruthBeaconException):
    public_message = "No valid response from AI"

    def __init__(self, reason: str):
        super().__init__(
            f"Provider returned no usable content: {reason}",
            {"reason": reason}
        )

class MalformedPayloadException(TruthBeaconException):
    public_message = "Malformed JSON from AI"

    def __init__(self, reason: str, content: str = ""):
        super().__init__(
            f"Provider content is not valid JSON: {reason}",
            {"reason": reason, "content_preview": content[:200]}
        )

class SchemaViolationException(TruthBeaconException):
    public_message = "Unexpected response format from AI"

    def __init__(self, errors: list):
        super().__init__(
            f"Provider payload failed validation with {len(errors)} error(s)",
            {"errors": errors}
        )

class ProviderUnavailableException(TruthBeaconException):
    public_message = "AI provider unavailable"

    def __init__(self, reason: str, recoverable: bool = True):
        super().__init__(
            f"LLM service error: {reason}",
            {"reason": reason, "recoverable": recoverable}
        )
