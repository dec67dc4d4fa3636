"""Utility modules."""
from testhub.utils.json_utils import read_json_file
from testhub.utils.time_utils import ensure_utc, epoch_millis, isoformat_utc, utc_now
from testhub.utils.validation import describe_validation_errors

__all__ = [
    "read_json_file",
    "ensure_utc",
    "epoch_millis",
    "isoformat_utc",
    "utc_now",
    "describe_validation_errors",
]
