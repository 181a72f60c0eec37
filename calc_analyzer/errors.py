# errors.py

# ---------------------------
# Error Classes
# ---------------------------

class CalculatorError(Exception):
    """Base class for calculator errors."""
    pass

class InvalidInputError(CalculatorError):
    """Raised when a line of user input cannot be accepted."""
    pass

class InvalidNumberError(InvalidInputError):
    """Raised when text is not a finite number."""
    pass

class InvalidOperatorError(InvalidInputError):
    """Raised when text is not one of the recognized operator tokens."""
    pass

class ConfigError(CalculatorError):
    """Raised when a configuration value cannot be used."""
    pass
