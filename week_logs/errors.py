class WeekLogsError(Exception):
    """Base exception for every failure that aborts a report run"""

    pass


class ConfigError(WeekLogsError):
    """The configuration file could not be read or is invalid"""

    pass


class AuthError(WeekLogsError):
    """Credentials for the sheet could not be loaded"""

    pass


class SheetError(WeekLogsError):
    """Custom exception for sheet-related errors"""

    pass


class MalformedLogError(WeekLogsError):
    """A sheet row could not be turned into a log entry"""

    pass


class MalformedRow(MalformedLogError):
    pass


class MalformedDate(MalformedLogError):
    pass


class MalformedDuration(MalformedLogError):
    pass


class TemplateError(WeekLogsError):
    """The report template could not be loaded or rendered"""

    pass


class ConversionError(WeekLogsError):
    """The PDF converter failed or could not be started"""

    pass
