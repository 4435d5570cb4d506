"""Constants for the forensic analyzer to eliminate string literal duplication."""

# Log row schema
LOG_COLUMNS = [
    "timestamp",
    "userId",
    "sessionId",
    "actionType",
    "targetResource",
    "severityLevel",
    "bytesTransferred",
]
FIELD_COUNT = len(LOG_COLUMNS)
FIELD_DELIMITER = ","
HEADER_TOKEN = "timestamp"

# Session actions (matched case-insensitively)
ACTION_LOGIN = "LOGIN"
ACTION_LOGOUT = "LOGOUT"

# Spike detection defaults
DEFAULT_SPIKE_K = 2.0
DEFAULT_BUCKET_WIDTH = 1

# Configuration
CONFIG_PATH = "config"
CONFIG_FILE = "analysis.yaml"
ENV_SPIKE_K = "FORENSIC_SPIKE_K"
ENV_BUCKET_WIDTH = "FORENSIC_BUCKET_WIDTH"
ENV_STRICT_INGEST = "FORENSIC_STRICT_INGEST"

# Error Messages
FILE_NOT_FOUND_ERROR = "File not found or inaccessible"
NON_INTEGER_FIELD_ERROR = "non-integer value in numeric field"
NEGATIVE_BYTES_ERROR = "bytesTransferred must be non-negative"
UNDECODABLE_BYTES_WARNING = "contains undecodable bytes"
