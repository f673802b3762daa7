class LedgerError(Exception):
    """Base class for every error raised by the ledger core."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidSplitError(LedgerError, ValueError):
    """Split inputs are inconsistent with the expense (mode, totals, roster)."""


class ParticipantNotFoundError(LedgerError, LookupError):
    """Participant id is not part of the group roster."""
