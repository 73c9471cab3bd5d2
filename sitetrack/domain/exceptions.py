"""
Domain Exceptions for site financial tracking.

Raised at the data boundary only:
- Record mapping (malformed rows from the data store)
- Upstream data-quality checks
- Lookup of unknown sites

The metrics engine itself never raises.
"""


class DomainError(Exception):
    """Base exception for all domain errors."""

    def __init__(self, message: str, code: str = "DOMAIN_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)


# =============================================================================
# Lookup Exceptions
# =============================================================================

class SiteNotFoundError(DomainError):
    """Raised when a site cannot be found."""

    def __init__(self, site_id: str):
        message = f"Site with id '{site_id}' not found"
        super().__init__(message, code="SITE_NOT_FOUND")
        self.site_id = site_id


# =============================================================================
# Mapping Exceptions
# =============================================================================

class RecordMappingError(DomainError):
    """Raised when a raw data-store record cannot be mapped to an entity."""

    def __init__(self, record_kind: str, field: str, reason: str):
        message = f"Cannot map {record_kind} record: field '{field}' {reason}"
        super().__init__(message, code="RECORD_MAPPING_ERROR")
        self.record_kind = record_kind
        self.field = field
        self.reason = reason


# =============================================================================
# Loading Exceptions
# =============================================================================

class DatasetLoadError(DomainError):
    """Raised when an exported data file cannot be read."""

    def __init__(self, path: str, reason: str):
        message = f"Cannot read data file '{path}': {reason}"
        super().__init__(message, code="DATASET_LOAD_ERROR")
        self.path = path
        self.reason = reason


# =============================================================================
# Validation Exceptions
# =============================================================================

class InvariantViolationError(DomainError):
    """Raised when a mathematical invariant is violated."""

    def __init__(self, invariant_name: str, expected: str, actual: str):
        message = (
            f"Invariant '{invariant_name}' violated. "
            f"Expected: {expected}, Actual: {actual}"
        )
        super().__init__(message, code="INVARIANT_VIOLATION")
        self.invariant_name = invariant_name
        self.expected = expected
        self.actual = actual
