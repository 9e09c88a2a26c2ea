class KhmerCalError(Exception):
    """Base error."""

class InvalidDateError(KhmerCalError, ValueError):
    """Raised for a malformed or out-of-range Gregorian date/time."""

class InvalidKhmerDateError(KhmerCalError, ValueError):
    """Raised for a malformed or out-of-range Khmer lunar date."""

class NotFoundError(KhmerCalError, LookupError):
    """Raised when the Khmer -> Gregorian search window holds no match."""

class ComputationInvariantError(KhmerCalError, RuntimeError):
    """Internal constants/logic failure (e.g. no New Year sotin with angsar 0)."""
