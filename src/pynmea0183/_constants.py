"""Internal constants shared across the library."""

MAX_SENTENCE_LENGTH = 128
MAX_FIELDS = 32

SENTENCE_START = "$"
ENCAPSULATED_START = "!"
CHECKSUM_DELIMITER = "*"
FIELD_DELIMITER = ","

# ------------------------------------------------------------------
# Unit conversions
# ------------------------------------------------------------------

KNOTS_TO_KMH = 1.852
KNOTS_TO_MPS = 0.514444
KMH_TO_KNOTS = 1.0 / KNOTS_TO_KMH
MPS_TO_KNOTS = 1.0 / KNOTS_TO_MPS

FEET_TO_METERS = 0.3048
FATHOMS_TO_METERS = 1.8288

# Two-digit years are mapped into this century.
CENTURY_BASE = 2000

# ------------------------------------------------------------------
# Fixed capacities of the state snapshot
# ------------------------------------------------------------------

# Integer fields are stored as signed 64-bit values.
MIN_INTEGER = -(2**63)
MAX_INTEGER = 2**63 - 1

MAX_SATELLITES_IN_VIEW = 32
MAX_SATELLITES_USED = 12
SATELLITES_PER_GSV = 4

MAX_TALKER_LENGTH = 2
MAX_ID_LENGTH = 16
MAX_TEXT_LENGTH = 64
MAX_PAYLOAD_LENGTH = 82
