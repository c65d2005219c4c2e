"""
Profile service: the save and list logic shared by every entry point.

The web form, the JSON API and the Lambda functions all call this service and
only translate its ProfileOutcome into their own response format.
"""
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from models.profile import Profile, ProfileRecord, ProfileValidationError
from utils.db.profiles import ProfileStore

# Configure logging
logger = logging.getLogger(__name__)

SAVE_SUCCESS_MESSAGE = "Profile saved successfully"
SAVE_FAILURE_MESSAGE = "An error occurred while saving the profile"
LIST_SUCCESS_MESSAGE = "Profiles retrieved successfully"
LIST_FAILURE_MESSAGE = "An error occurred while retrieving profiles"


@dataclass
class ProfileOutcome:
    """Result of a save or list call, with an HTTP-equivalent status code."""
    success: bool
    message: str
    status_code: int
    row_key: Optional[str] = None
    profiles: Optional[List[ProfileRecord]] = None
    error: Optional[str] = None
    record: Optional[ProfileRecord] = field(default=None, repr=False)

    @property
    def is_client_error(self) -> bool:
        return 400 <= self.status_code < 500

    @property
    def count(self) -> int:
        return len(self.profiles or [])

    def to_dict(self) -> Dict[str, Any]:
        """JSON body shared by the API and the Lambda functions."""
        body: Dict[str, Any] = {
            "success": self.success,
            "message": self.message,
        }
        if self.row_key is not None:
            body["rowKey"] = self.row_key
        if self.profiles is not None:
            body["count"] = self.count
            body["profiles"] = [profile.to_response_dict() for profile in self.profiles]
        if self.error is not None:
            body["error"] = self.error
        return body


class ProfileService:
    """Saves and lists profiles through a ProfileStore."""

    def __init__(self, store: ProfileStore):
        self.store = store

    def save(self, raw_input: Any) -> ProfileOutcome:
        """
        Parse raw input into a Profile and store it as a new record.

        Args:
            raw_input: None, a JSON document (str or bytes), a mapping or a Profile

        Returns:
            ProfileOutcome with status 200 and the new row key, 400 when the
            input is unusable (the store is not touched), or 500 when the store
            fails.
        """
        try:
            profile = Profile.parse_raw_input(raw_input)
        except ProfileValidationError as e:
            logger.warning(f"Rejected profile save: {str(e)}")
            return ProfileOutcome(success=False, message=str(e), status_code=400)

        return self.save_profile(profile)

    def save_profile(self, profile: Profile) -> ProfileOutcome:
        """Store an already validated Profile as a new record."""
        record = ProfileRecord.from_profile(profile)
        try:
            self.store.ensure_table()
            stored = self.store.insert(record)
        except Exception as e:
            logger.error(f"Error occurred while saving profile: {str(e)}", exc_info=True)
            return ProfileOutcome(
                success=False,
                message=SAVE_FAILURE_MESSAGE,
                status_code=500,
                error=str(e),
            )

        logger.info(f"Profile saved successfully with RowKey: {stored.row_key}")
        return ProfileOutcome(
            success=True,
            message=SAVE_SUCCESS_MESSAGE,
            status_code=200,
            row_key=stored.row_key,
            record=stored,
        )

    def list_all(self) -> ProfileOutcome:
        """
        Return every stored profile.

        A missing table is reported as success with zero profiles.
        """
        try:
            profiles = self.store.scan_all()
        except Exception as e:
            logger.error(f"Error occurred while retrieving profiles: {str(e)}", exc_info=True)
            return ProfileOutcome(
                success=False,
                message=LIST_FAILURE_MESSAGE,
                status_code=500,
                error=str(e),
            )

        logger.info(f"Retrieved {len(profiles)} profiles from table storage")
        return ProfileOutcome(
            success=True,
            message=LIST_SUCCESS_MESSAGE,
            status_code=200,
            profiles=profiles,
        )
