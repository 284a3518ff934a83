"""Centralized exit codes for the propsguard CLI."""


class ExitCodes:
    """Standard exit codes for propsguard CLI commands."""

    SUCCESS = 0

    FINDINGS = 1

    FILE_ERROR = 2

    @classmethod
    def get_description(cls, code: int) -> str:
        """Get human-readable description for an exit code."""
        descriptions = {
            cls.SUCCESS: "Success - No error-level findings",
            cls.FINDINGS: "Error-level findings remain",
            cls.FILE_ERROR: "One or more files could not be read or written",
        }
        return descriptions.get(code, f"Unknown exit code: {code}")
