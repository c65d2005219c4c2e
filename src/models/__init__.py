"""
Models package for the profile registration service.
"""

from .profile import (
    PROFILE_PARTITION_KEY,
    Profile,
    ProfileRecord,
    ProfileValidationError,
)

__all__ = [
    'PROFILE_PARTITION_KEY',
    'Profile',
    'ProfileRecord',
    'ProfileValidationError',
]
