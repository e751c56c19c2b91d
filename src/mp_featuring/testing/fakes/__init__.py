"""Testing fakes – in-memory doubles for the storage port."""
from mp_featuring.testing.fakes.feature_flags import AdapterCall, RecordingFeatureFlagAdapter

__all__ = ["AdapterCall", "RecordingFeatureFlagAdapter"]
