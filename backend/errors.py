"""Error types raised by the ledger core and mapped to HTTP responses in main.py."""


class LedgerError(Exception):
    """Base class for all ledger errors."""

    status_code = 500

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class ValidationError(LedgerError):
    """Malformed input to a write operation. Nothing has been persisted."""

    status_code = 400


class NotFoundError(LedgerError):
    status_code = 404

    def __init__(self, entity: str, entity_id):
        super().__init__(f"{entity} not found")
        self.entity = entity
        self.entity_id = entity_id


class PartialApplicationError(LedgerError):
    """An invoice could not apply all of its stock effects.

    The surrounding transaction is rolled back before this is raised, so the
    invoice is never left persisted without its stock movements.
    """

    status_code = 500

    def __init__(self, invoice_no: str, item_id: int):
        super().__init__(f"Stock update for item {item_id} failed while applying invoice {invoice_no}")
        self.invoice_no = invoice_no
        self.item_id = item_id


class StorageError(LedgerError):
    """The persistence layer is unavailable or rejected the write."""

    status_code = 503
    retryable = True
