"""
Domain errors raised by the fee services. Routers translate them to HTTP responses.
"""


class LedgerError(Exception):
    """Base class for fee ledger errors."""


class InvalidDate(LedgerError, ValueError):
    def __init__(self, value):
        self.value = value
        super().__init__(f"Invalid date: {value!r}")


class SettingsNotConfigured(LedgerError):
    def __init__(self):
        super().__init__("School settings not configured. Please set up the school first.")


class ClassNotFound(LedgerError):
    def __init__(self, class_name):
        self.class_name = class_name
        super().__init__(f'Class "{class_name}" not found in school settings.')


class UnknownTransportTier(LedgerError):
    def __init__(self, label):
        self.label = label
        super().__init__(f'Unknown transport type "{label}".')


class DuplicateLedgerEntry(LedgerError):
    def __init__(self, student_id, month=None, year=None):
        self.student_id = student_id
        self.month = month
        self.year = year
        if month is None:
            message = f"Fee records for student {student_id} already exist."
        else:
            message = f"Fee record for student {student_id} already exists for {month:02d}/{year}."
        super().__init__(message)


class InvalidPayment(LedgerError, ValueError):
    pass
