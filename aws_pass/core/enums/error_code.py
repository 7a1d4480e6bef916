"""Error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming.

Categories:
- Validation errors (VALIDATION_*)
- Secret resolution errors (SECRET_*)
- Authentication errors (MFA_*)
- Configuration errors (CONFIG_*, STORE_*)
- Backend errors (BACKEND_*)
"""

from enum import Enum


class ErrorCode(Enum):
    """Error codes (machine-readable).

    Error codes follow ENTITY_ACTION_REASON naming convention.
    """

    # Validation errors
    VALIDATION_FAILED = "validation_failed"

    # Secret resolution errors
    SECRET_NOT_FOUND = "secret_not_found"
    SECRET_NAME_AMBIGUOUS = "secret_name_ambiguous"
    SECRET_ALREADY_EXISTS = "secret_already_exists"
    SECRET_PENDING_DELETION = "secret_pending_deletion"
    SECRET_VALUE_NOT_STRING = "secret_value_not_string"

    # Authentication errors
    MFA_AUTHENTICATION_FAILED = "mfa_authentication_failed"

    # Configuration errors
    CONFIG_FILE_MISSING = "config_file_missing"
    CONFIG_FILE_INVALID = "config_file_invalid"
    STORE_ALREADY_INITIALIZED = "store_already_initialized"

    # Backend errors
    BACKEND_UNAVAILABLE = "backend_unavailable"
    BACKEND_REQUEST_FAILED = "backend_request_failed"
