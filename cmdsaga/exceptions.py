# file: cmdsaga/exceptions.py
"""
Defines the exception hierarchy raised by the library itself.

Errors raised by user-supplied execute/undo callables are never wrapped
in these types; they always surface as the original exception object.
"""

class CmdSagaError(Exception):
    """Base exception for all library-raised errors."""
    pass

# --- Configuration Errors ---
class ConfigurationError(CmdSagaError):
    """Error related to loading, parsing, or saving configuration."""
    pass

# --- Construction Errors ---
class InvalidCommandError(CmdSagaError, TypeError):
    """A command was built from something that is not callable."""
    pass

class InvalidCompositionError(CmdSagaError, TypeError):
    """A composer was given arguments it cannot compose."""
    pass

class InvalidStepGeneratorError(InvalidCompositionError):
    """A step factory returned something other than a generator."""
    pass

# --- Undo Errors ---
class CommandNotUndoableError(CmdSagaError):
    """undo() was called on a command that has no compensating action."""
    pass
