"""
Generator domain entity.

A generator is the template license keys are produced from: which
characters a key is drawn from, how it is chunked and decorated, and which
activation and expiry limits apply to keys issued from it.
It contains business logic and is independent of infrastructure.
"""
import dataclasses
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

from core.domain.coercion import absint, is_numeric, sanitize_text_field
from core.domain.exceptions import GeneratorValidationError
from core.domain.value_objects import UNSET, ActorId

MAX_TEXT_LENGTH = 255

TEXT_FIELDS = ("name", "charset", "separator", "prefix", "suffix")
COUNT_FIELDS = ("chunks", "chunk_length")
LIMIT_FIELDS = ("times_activated_max", "expires_in")

# Required on create, checked in this order; zero, "" and "0" count as missing.
REQUIRED_ON_CREATE: Tuple[Tuple[str, str], ...] = (
    ("name", "The Generator name is missing from the request."),
    ("charset", "The Generator charset is missing from the request."),
    ("chunks", "The Generator chunks is missing from the request."),
    ("chunk_length", "The Generator chunk length is missing from the request."),
)


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _is_count(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def _invalid(field_name: str) -> GeneratorValidationError:
    return GeneratorValidationError(f"Generator {field_name} is invalid.", field=field_name)


def _not_absolute_integer(field_name: str) -> GeneratorValidationError:
    return GeneratorValidationError(
        f"Generator {field_name} must be an absolute integer.", field=field_name
    )


def _check_length(field_name: str, value: Optional[str]) -> None:
    if value is not None and len(value) > MAX_TEXT_LENGTH:
        raise GeneratorValidationError(f"Generator {field_name} is too long.", field=field_name)


@dataclass(frozen=True)
class GeneratorDraft:
    """
    Input for creating a generator.

    Values are already coerced (integers, sanitized strings); absent
    values are None.
    """

    name: Optional[str] = None
    charset: Optional[str] = None
    chunks: Optional[int] = None
    chunk_length: Optional[int] = None
    times_activated_max: Optional[int] = None
    separator: Optional[str] = None
    prefix: Optional[str] = None
    suffix: Optional[str] = None
    expires_in: Optional[int] = None

    def validate(self) -> None:
        """
        Check the required fields in order.

        Raises:
            GeneratorValidationError: Naming the first missing or invalid field
        """
        for field_name, message in REQUIRED_ON_CREATE:
            value = getattr(self, field_name)
            if not value or value == "0":
                raise GeneratorValidationError(message, field=field_name)
            if field_name in COUNT_FIELDS and not (_is_count(value) and value > 0):
                raise GeneratorValidationError(message, field=field_name)


def _parse_required_text(field_name: str, raw: Any) -> str:
    if raw is None or isinstance(raw, (dict, list)):
        raise _invalid(field_name)
    text = sanitize_text_field(raw)
    if not text:
        raise _invalid(field_name)
    return text


def _parse_optional_text(field_name: str, raw: Any) -> Optional[str]:
    if raw is None:
        return None
    if isinstance(raw, (dict, list)):
        raise _invalid(field_name)
    return sanitize_text_field(raw)


def _parse_count(field_name: str, raw: Any) -> int:
    if not is_numeric(raw):
        raise _not_absolute_integer(field_name)
    return absint(raw)


def _parse_limit(field_name: str, raw: Any) -> Optional[int]:
    if raw is None:
        return None
    return _parse_count(field_name, raw)


# Checked in this order, so the first failing field is the one reported.
UPDATE_PARSERS: Tuple[Tuple[str, Callable[[str, Any], Any]], ...] = (
    ("name", _parse_required_text),
    ("charset", _parse_required_text),
    ("chunks", _parse_count),
    ("chunk_length", _parse_count),
    ("times_activated_max", _parse_count),
    ("expires_in", _parse_limit),
    ("separator", _parse_optional_text),
    ("prefix", _parse_optional_text),
    ("suffix", _parse_optional_text),
)


@dataclass(frozen=True)
class GeneratorChanges:
    """
    Partial update of a generator.

    Every field defaults to UNSET, so "not supplied" is distinct from an
    explicit null (which clears expires_in and the optional strings).
    """

    name: Any = UNSET
    charset: Any = UNSET
    chunks: Any = UNSET
    chunk_length: Any = UNSET
    times_activated_max: Any = UNSET
    separator: Any = UNSET
    prefix: Any = UNSET
    suffix: Any = UNSET
    expires_in: Any = UNSET

    @classmethod
    def parse(cls, payload: Mapping[str, Any]) -> "GeneratorChanges":
        """
        Build changes from a decoded request body.

        Unknown keys (including id and audit fields) are ignored.

        Args:
            payload: Decoded JSON object

        Returns:
            GeneratorChanges with the supplied fields coerced

        Raises:
            GeneratorValidationError: For the first field failing its check
        """
        values = {}
        for field_name, parser in UPDATE_PARSERS:
            if field_name in payload:
                values[field_name] = parser(field_name, payload[field_name])
        return cls(**values)

    def present(self) -> Dict[str, Any]:
        """Return only the supplied fields."""
        return {
            field.name: getattr(self, field.name)
            for field in dataclasses.fields(self)
            if getattr(self, field.name) is not UNSET
        }

    def is_empty(self) -> bool:
        return not self.present()


@dataclass(frozen=True)
class Generator:
    """
    Generator domain entity.

    Immutable: updates produce a new instance through apply().
    `id` is None only before the generator has been persisted.
    """

    id: Optional[int]
    name: str
    charset: str
    chunks: int
    chunk_length: int
    times_activated_max: Optional[int]
    separator: Optional[str]
    prefix: Optional[str]
    suffix: Optional[str]
    expires_in: Optional[int]
    created_at: datetime
    created_by: int
    updated_at: Optional[datetime] = None
    updated_by: Optional[int] = None

    def __post_init__(self):
        """Validate generator entity."""
        for field_name in ("name", "charset"):
            value = getattr(self, field_name)
            if not isinstance(value, str) or not value.strip():
                raise _invalid(field_name)
        for field_name in COUNT_FIELDS:
            if not _is_count(getattr(self, field_name)):
                raise _not_absolute_integer(field_name)
        for field_name in LIMIT_FIELDS:
            value = getattr(self, field_name)
            if value is not None and not _is_count(value):
                raise _not_absolute_integer(field_name)
        for field_name in TEXT_FIELDS:
            value = getattr(self, field_name)
            if value is not None and not isinstance(value, str):
                raise _invalid(field_name)
            _check_length(field_name, value)

    @classmethod
    def create(
        cls,
        draft: GeneratorDraft,
        actor: ActorId,
        created_at: Optional[datetime] = None,
    ) -> "Generator":
        """
        Create a new, not yet persisted Generator.

        Args:
            draft: Coerced create input
            actor: User creating the generator
            created_at: Creation time (defaults to now, UTC)

        Returns:
            Generator entity instance

        Raises:
            GeneratorValidationError: If a required field is missing or invalid
        """
        draft.validate()
        return cls(
            id=None,
            name=draft.name,
            charset=draft.charset,
            chunks=draft.chunks,
            chunk_length=draft.chunk_length,
            times_activated_max=draft.times_activated_max,
            separator=draft.separator,
            prefix=draft.prefix,
            suffix=draft.suffix,
            expires_in=draft.expires_in,
            created_at=created_at or _now(),
            created_by=int(actor),
        )

    def apply(
        self,
        changes: GeneratorChanges,
        actor: ActorId,
        updated_at: Optional[datetime] = None,
    ) -> "Generator":
        """
        Create a new Generator instance with the changes merged in.

        Args:
            changes: Supplied fields
            actor: User performing the update
            updated_at: Update time (defaults to now, UTC)

        Returns:
            New Generator instance with bumped update audit fields
        """
        return dataclasses.replace(
            self,
            **changes.present(),
            updated_at=updated_at or _now(),
            updated_by=int(actor),
        )

