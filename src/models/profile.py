"""
Profile models for the profile registration service.
"""
import json
import uuid
import logging
from datetime import datetime, timezone
from typing import Optional, Dict, Any, Union, Mapping
from typing_extensions import Self

from pydantic import BaseModel, Field, ConfigDict, field_validator, model_validator

# Configure logging
logger = logging.getLogger(__name__)

PROFILE_PARTITION_KEY = "Profile"


class ProfileValidationError(ValueError):
    """Raised when inbound data cannot be turned into a Profile."""
    pass


class Profile(BaseModel):
    """
    The user-supplied part of a profile.

    Inbound keys are matched case-insensitively, so ``Name``, ``NAME`` and
    ``name`` all populate ``name``. Missing fields default to an empty string.
    Age is free text and is never checked for being numeric.
    """
    name: str = ""
    surname: str = ""
    email: str = ""
    age: str = ""

    model_config = ConfigDict(extra="ignore")

    @model_validator(mode='before')
    @classmethod
    def normalize_keys(cls, data: Any) -> Any:
        if isinstance(data, Mapping):
            return {str(key).lower(): value for key, value in data.items()}
        return data

    @field_validator('name', 'surname', 'email', 'age', mode='before')
    @classmethod
    def coerce_text(cls, v: Any) -> Any:
        if v is None:
            return ""
        # JSON numbers are accepted for free-text fields (e.g. "age": 30)
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v

    @classmethod
    def parse_raw_input(cls, raw: Union[None, str, bytes, Mapping[str, Any], 'Profile']) -> 'Profile':
        """
        Build a Profile from a JSON document, a mapping or an existing Profile.

        Raises:
            ProfileValidationError: if the input is empty, not a JSON object,
                or fails validation.
        """
        if raw is None:
            raise ProfileValidationError("Invalid profile data")
        if isinstance(raw, Profile):
            return raw
        if isinstance(raw, (bytes, bytearray)):
            try:
                raw = raw.decode('utf-8')
            except UnicodeDecodeError:
                raise ProfileValidationError("Invalid profile data")
        if isinstance(raw, str):
            if not raw.strip():
                raise ProfileValidationError("Request body is empty")
            try:
                raw = json.loads(raw)
            except json.JSONDecodeError:
                logger.warning("Profile body is not valid JSON")
                raise ProfileValidationError("Invalid profile data")
        if not isinstance(raw, Mapping):
            raise ProfileValidationError("Invalid profile data")
        try:
            return cls.model_validate(raw)
        except ValueError as e:
            # pydantic.ValidationError is a ValueError subclass
            logger.warning(f"Profile validation failed: {str(e)}")
            raise ProfileValidationError("Invalid profile data")

    def missing_fields(self) -> list[str]:
        """Names of fields that are blank."""
        return [field for field in ('name', 'surname', 'email', 'age') if not getattr(self, field).strip()]


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ProfileRecord(BaseModel):
    """
    A Profile as stored in the Profiles table.

    The record holds the Profile alongside the storage metadata. ``timestamp``
    and ``etag`` belong to the store and are only populated on records that
    have been written or read back.
    """
    profile: Profile
    partition_key: str = Field(default=PROFILE_PARTITION_KEY, alias="partitionKey")
    row_key: str = Field(default_factory=lambda: str(uuid.uuid4()), alias="rowKey")
    created_date: datetime = Field(default_factory=_utc_now, alias="createdDate")
    timestamp: Optional[datetime] = None
    etag: Optional[str] = None

    model_config = ConfigDict(
        populate_by_name=True,
        frozen=True,
    )

    @field_validator('partition_key')
    @classmethod
    def check_partition_key(cls, v: str) -> str:
        if v != PROFILE_PARTITION_KEY:
            raise ValueError(f"Partition key must be '{PROFILE_PARTITION_KEY}', got '{v}'")
        return v

    @classmethod
    def from_profile(cls, profile: Profile) -> Self:
        """Create a fresh record with a newly generated row key."""
        return cls(profile=profile, row_key=str(uuid.uuid4()))

    def to_dynamodb_item(self) -> Dict[str, Any]:
        """
        Serializes the record to a DynamoDB item.

        Backend metadata is left out unless it has been set.
        """
        item: Dict[str, Any] = {
            'PartitionKey': self.partition_key,
            'RowKey': self.row_key,
            'Name': self.profile.name,
            'Surname': self.profile.surname,
            'Email': self.profile.email,
            'Age': self.profile.age,
            'CreatedDate': self.created_date.isoformat(),
        }
        if self.timestamp is not None:
            item['Timestamp'] = self.timestamp.isoformat()
        if self.etag is not None:
            item['ETag'] = self.etag
        return item

    @classmethod
    def from_dynamodb_item(cls, data: Dict[str, Any]) -> Self:
        """Deserializes a DynamoDB item into a ProfileRecord."""
        profile = Profile(
            name=data.get('Name', ''),
            surname=data.get('Surname', ''),
            email=data.get('Email', ''),
            age=data.get('Age', ''),
        )
        return cls.model_validate({
            'profile': profile,
            'partitionKey': data.get('PartitionKey', PROFILE_PARTITION_KEY),
            'rowKey': data['RowKey'],
            'createdDate': data.get('CreatedDate') or _utc_now(),
            'timestamp': data.get('Timestamp'),
            'etag': data.get('ETag'),
        })

    def with_backend_metadata(self, timestamp: datetime, etag: str) -> Self:
        """Copy of this record carrying the metadata the store assigned on write."""
        return self.model_copy(update={'timestamp': timestamp, 'etag': etag})

    def to_response_dict(self) -> Dict[str, Any]:
        """Flat JSON-safe representation used in API responses."""
        return {
            'partitionKey': self.partition_key,
            'rowKey': self.row_key,
            'name': self.profile.name,
            'surname': self.profile.surname,
            'email': self.profile.email,
            'age': self.profile.age,
            'createdDate': self.created_date.isoformat(),
            'timestamp': self.timestamp.isoformat() if self.timestamp else None,
            'etag': self.etag,
        }
