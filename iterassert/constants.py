# iterassert/constants.py
# Single authoritative definitions for iterassert.
# Referenced by exceptions.py, failure_builder.py, iterable_matches.py and
# logging_layer.py. Reason literals are part of the public message contract:
# a change to any of them is a breaking change.
#
# Standard import pattern:
#   from iterassert.constants import (
#       REASON_EXPECTED_NULL,
#       REASON_ACTUAL_NULL,
#       REASON_CONTENTS_MISMATCH,
#       REASON_LENGTHS_DIFFER,
#       FAILURE_KINDS,
#   )

VERSION: str = "1.0.0"


# ---------------------------------------------------------------------------
# REASON LITERALS (byte-for-byte)
# ---------------------------------------------------------------------------

REASON_PREDICATE_NULL:    str = "predicate must not be null"
REASON_EXPECTED_NULL:     str = "expected iterable was <null>"
REASON_ACTUAL_NULL:       str = "actual iterable was <null>"
REASON_CONTENTS_MISMATCH: str = "iterable contents do not match at index "  # + index
REASON_LENGTHS_DIFFER:    str = "iterable lengths differ"


# ---------------------------------------------------------------------------
# MESSAGE FORMAT
# ---------------------------------------------------------------------------

MESSAGE_SEPARATOR: str = " ==> "
VALUES_SEPARATOR:  str = ", "


# ---------------------------------------------------------------------------
# FAILURE KIND REGISTRY
# ---------------------------------------------------------------------------
# Maps failure kind -> reason literal (or reason prefix for CONTENTS_MISMATCH).
# AssertionFailedError.kind is None or one of these keys.

FAILURE_KINDS = {
    "EXPECTED_NULL":     REASON_EXPECTED_NULL,
    "ACTUAL_NULL":       REASON_ACTUAL_NULL,
    "CONTENTS_MISMATCH": REASON_CONTENTS_MISMATCH,
    "LENGTH_MISMATCH":   REASON_LENGTHS_DIFFER,
}


# ---------------------------------------------------------------------------
# EVENT TYPES
# ---------------------------------------------------------------------------

EVENT_MATCH_PASSED: str = "MATCH_PASSED"
EVENT_MATCH_FAILED: str = "MATCH_FAILED"
