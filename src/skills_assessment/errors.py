"""Exception hierarchy for the skills assessment service."""


class SkillsAssessmentError(Exception):
    """Base exception for all skills assessment errors."""


class TemplateNotFound(SkillsAssessmentError):
    """Raised when a prompt document has no ``## Prompt Template`` section."""

    def __init__(self, source: str | None = None):
        self.source = source
        message = "Prompt template section not found"
        if source:
            message += f" in {source}"
        super().__init__(message)


class MissingPlaceholder(SkillsAssessmentError):
    """Raised when a template references a name absent from the substitution mapping."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Missing value for template placeholder: {name}")


class ResponseParseError(SkillsAssessmentError):
    """Raised when an LLM response cannot be decoded as a JSON object.

    Keeps the raw response and the underlying decoder error for diagnostics.
    """

    def __init__(self, raw_response: str | None, error_cause: Exception | None = None, message: str | None = None):
        self.raw_response = raw_response
        self.error_cause = error_cause
        msg = message or "Failed to parse response as JSON"
        if error_cause:
            msg += f": {error_cause}"
        super().__init__(msg)


class ConfigError(SkillsAssessmentError):
    """Raised when a role or provider configuration is not found or unusable."""

    def __init__(self, config_key: str, message: str | None = None):
        self.config_key = config_key
        super().__init__(message or f"Configuration not found for: {config_key}")


class ValidationError(SkillsAssessmentError):
    """Raised when input validation fails."""

    def __init__(self, field: str, value=None, message: str | None = None):
        self.field = field
        self.value = value
        msg = message or f"Invalid {field}"
        if value is not None:
            msg += f": {value}"
        super().__init__(msg)


class FileError(SkillsAssessmentError):
    """Raised when a required file cannot be found or read."""


class LLMError(SkillsAssessmentError):
    """Raised when the LLM API call fails."""

    def __init__(self, http_code: int | None = None, response_body: str | None = None):
        self.http_code = http_code
        self.response_body = response_body
        if http_code:
            message = f"LLM API error - HTTP {http_code}"
        else:
            message = "LLM API error"
        if response_body:
            message += f": {response_body}"
        super().__init__(message)
