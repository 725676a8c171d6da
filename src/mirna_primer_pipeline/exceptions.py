"""Custom exceptions for miRNA primer pipeline."""


class PipelineError(Exception):
    """Base exception for all pipeline errors."""
    pass


class InputError(PipelineError):
    """Exception raised when raw input cannot be processed."""
    pass


class ValidationError(PipelineError):
    """Exception raised when a sequence validator is misconfigured."""
    pass


class TransformError(PipelineError):
    """Exception raised when a sequence cannot be turned into primers."""

    def __init__(self, message: str, sequence: str = None):
        self.sequence = sequence

        if sequence is not None:
            message = f"Primer transformation failed for {sequence}: {message}"

        super().__init__(message)


class ConfigurationError(PipelineError):
    """Exception raised for configuration errors."""

    def __init__(self, message: str, config_file: str = None, parameter: str = None):
        self.config_file = config_file
        self.parameter = parameter

        if config_file is not None:
            message = f"Configuration error in {config_file}: {message}"
        if parameter is not None:
            message = f"{message} (parameter: {parameter})"

        super().__init__(message)
