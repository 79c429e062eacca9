class DocseedError(Exception):
    """Base class for docseed exceptions."""
    pass

class ConfigurationError(DocseedError):
    """Exception for configuration errors."""
    pass

class FileServiceError(DocseedError):
    """Exception for file service errors."""
    pass

class SelectionError(DocseedError):
    """Raised when a requested line range does not fit the file."""
    def __init__(self, path, start_line, end_line, message=None):
        self.path = path
        self.start_line = start_line
        self.end_line = end_line
        self.message = message or f"Invalid line range {start_line}-{end_line} for '{path}'."
        super().__init__(self.message)
