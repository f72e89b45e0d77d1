"""Custom exceptions for scriptsync."""

class ScriptSyncError(Exception):
    """Base exception for scriptsync."""
    pass

class ConfigError(ScriptSyncError):
    """Invalid configuration value."""
    pass

class ValidationError(ScriptSyncError):
    """Invalid input parameters or token fields."""
    pass

class TranscriptError(ScriptSyncError):
    """Error reading or decoding a recognizer transcript."""
    pass
