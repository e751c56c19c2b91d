"""Testing support – fakes for code that uses feature flags.

Usage::

    from mp_featuring.testing import RecordingFeatureFlagAdapter
"""

from mp_featuring.testing.fakes import AdapterCall, RecordingFeatureFlagAdapter

__all__ = ["AdapterCall", "RecordingFeatureFlagAdapter"]
