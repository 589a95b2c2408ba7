"""
Custom exceptions for the HTMLifier
Centralised exception handling for better error management
"""


class HtmlifierError(Exception):
    """Base exception for all HTMLifier errors"""
    pass


class ConfigurationError(HtmlifierError):
    """Raised when configuration is invalid or missing"""
    pass


class ProjectLoadError(HtmlifierError):
    """Raised when a project cannot be fetched or decoded"""
    def __init__(self, message: str, source: str = None):
        super().__init__(message)
        self.source = source


class AssetEncodingError(HtmlifierError):
    """Raised when a file cannot be turned into a data URL"""
    def __init__(self, message: str, file_name: str = None):
        super().__init__(message)
        self.file_name = file_name


class TemplateError(HtmlifierError):
    """Raised when the template and the computed placeholder values disagree"""
    def __init__(self, message: str, placeholder: str = None):
        super().__init__(message)
        self.placeholder = placeholder


class HtmlGenerationError(HtmlifierError):
    """Raised when producing or saving the final artifact fails"""
    def __init__(self, message: str, step: str = None, original_error: Exception = None):
        super().__init__(message)
        self.step = step
        self.original_error = original_error
