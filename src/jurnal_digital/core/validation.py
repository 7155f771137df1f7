"""Declarative request validation.

Each endpoint declares a rule table mapping field names to a list of
constraints. ``collect_violations`` runs every constraint against the raw
payload and returns all violations at once; ``validate_payload`` raises
``ValidationError`` when any exist and otherwise builds the endpoint's
pydantic input schema.
"""

import re
from datetime import date, datetime
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Type, TypeVar

from fastapi import Request
from pydantic import BaseModel, EmailStr, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from jurnal_digital.core.exceptions import FieldError, ValidationError

SchemaT = TypeVar("SchemaT", bound=BaseModel)

_EMAIL_ADAPTER = TypeAdapter(EmailStr)
OBJECT_ID_PATTERN = re.compile(r"^[0-9a-fA-F]{24}$")


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def parse_iso_date(value: Any) -> date:
    """Parse an ISO-8601 date or datetime string into a calendar date.

    Raises:
        ValueError: If the value is not an ISO-8601 date.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise ValueError(f"not an ISO-8601 date: {value!r}")
    text = value.strip()
    if len(text) == 10:
        return date.fromisoformat(text)
    return datetime.fromisoformat(text.replace("Z", "+00:00")).date()


class Constraint:
    """Base class for a single field constraint."""

    default_message = "Nilai tidak valid"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message

    def is_valid(self, value: Any) -> bool:
        raise NotImplementedError

    def check(self, value: Any) -> Optional[str]:
        """Return the violation message, or None if the value passes."""
        return None if self.is_valid(value) else self.message


class Required(Constraint):
    default_message = "Wajib diisi"

    def is_valid(self, value: Any) -> bool:
        return not _is_blank(value)


class NotBlank(Constraint):
    """A present value must not be empty; absence is still allowed."""

    default_message = "Tidak boleh kosong"

    def is_valid(self, value: Any) -> bool:
        return not _is_blank(value)


class Length(Constraint):
    """String length bounds, inclusive."""

    def __init__(
        self,
        min: Optional[int] = None,
        max: Optional[int] = None,
        message: Optional[str] = None,
    ):
        super().__init__(message)
        self.min = min
        self.max = max
        if message is None:
            if min is not None and max is not None:
                self.message = f"Panjang harus {min}-{max} karakter"
            elif min is not None:
                self.message = f"Minimal {min} karakter"
            else:
                self.message = f"Maksimal {max} karakter"

    def is_valid(self, value: Any) -> bool:
        if not isinstance(value, str):
            return False
        if self.min is not None and len(value) < self.min:
            return False
        if self.max is not None and len(value) > self.max:
            return False
        return True


class IntRange(Constraint):
    """Integer (or integer-valued string) within inclusive bounds."""

    def __init__(self, min: int, max: int, message: Optional[str] = None):
        super().__init__(message or f"Nilai harus {min}-{max}")
        self.min = min
        self.max = max

    def is_valid(self, value: Any) -> bool:
        if isinstance(value, bool):
            return False
        if isinstance(value, str):
            if not re.fullmatch(r"[+-]?\d+", value.strip()):
                return False
            try:
                value = int(value)
            except ValueError:
                # longer than the interpreter's int conversion limit
                return False
        if isinstance(value, float) and value.is_integer():
            value = int(value)
        if not isinstance(value, int):
            return False
        return self.min <= value <= self.max


class OneOf(Constraint):
    def __init__(self, choices: Iterable[str], message: Optional[str] = None):
        self.choices = tuple(choices)
        super().__init__(message or f"Harus salah satu dari: {', '.join(self.choices)}")

    def is_valid(self, value: Any) -> bool:
        return value in self.choices


class Email(Constraint):
    default_message = "Email tidak valid"

    def is_valid(self, value: Any) -> bool:
        if not isinstance(value, str):
            return False
        try:
            _EMAIL_ADAPTER.validate_python(value)
        except PydanticValidationError:
            return False
        return True


class ObjectId(Constraint):
    """24 hexadecimal characters, the identifier format of every record."""

    default_message = "ID tidak valid"

    def is_valid(self, value: Any) -> bool:
        return isinstance(value, str) and bool(OBJECT_ID_PATTERN.match(value))


class IsoDate(Constraint):
    default_message = "Format tanggal tidak valid"

    def is_valid(self, value: Any) -> bool:
        try:
            parse_iso_date(value)
        except ValueError:
            return False
        return True


Rules = Mapping[str, Sequence[Constraint]]


def check_field(field: str, value: Any, constraints: Sequence[Constraint]) -> List[FieldError]:
    """Check one field against its constraints.

    Fields without a ``Required`` constraint are skipped entirely when the
    value is absent (None). A present value, even an empty string, goes
    through every constraint. For required fields only the ``Required``
    message is reported when the value is blank.

    Args:
        field: Field name reported in each violation.
        value: Raw value from the request, or None when absent.
        constraints: Constraints declared for this field.

    Returns:
        List of violations, empty when the value is acceptable.
    """
    required = next((c for c in constraints if isinstance(c, Required)), None)
    if value is None and required is None:
        return []
    if required is not None and _is_blank(value):
        return [FieldError(field=field, message=required.message)]

    errors = []
    for constraint in constraints:
        message = constraint.check(value)
        if message is not None:
            errors.append(FieldError(field=field, message=message))
    return errors


def collect_violations(payload: Mapping[str, Any], rules: Rules) -> List[FieldError]:
    """Run a whole rule table against a payload."""
    errors: List[FieldError] = []
    for field, constraints in rules.items():
        errors.extend(check_field(field, payload.get(field), constraints))
    return errors


def ensure_valid(payload: Mapping[str, Any], rules: Rules) -> None:
    """Raise ``ValidationError`` if the payload violates any rule."""
    errors = collect_violations(payload, rules)
    if errors:
        raise ValidationError(errors)


def drop_blank(values: Mapping[str, Any]) -> Dict[str, Any]:
    """Treat empty query-string parameters as not given."""
    return {k: (None if _is_blank(v) else v) for k, v in values.items()}


def pydantic_errors_to_field_errors(errors: Iterable[Dict[str, Any]]) -> List[FieldError]:
    """Convert pydantic/FastAPI error dicts into field errors."""
    result = []
    for error in errors:
        loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
        field = ".".join(loc) or "body"
        message = "Wajib diisi" if error.get("type") == "missing" else error.get("msg", "Nilai tidak valid")
        result.append(FieldError(field=field, message=message))
    return result


def validate_payload(schema: Type[SchemaT], payload: Any, rules: Optional[Rules] = None) -> SchemaT:
    """Validate a raw payload and build the typed input schema.

    Args:
        schema: Pydantic model describing the endpoint input.
        payload: Decoded JSON body.
        rules: Rule table; defaults to ``schema.RULES``.

    Returns:
        Parsed schema instance.

    Raises:
        ValidationError: If the payload is not an object or violates a rule.
    """
    if not isinstance(payload, dict):
        raise ValidationError([FieldError(field="body", message="Body harus berupa objek JSON")])
    ensure_valid(payload, rules if rules is not None else getattr(schema, "RULES", {}))
    try:
        return schema.model_validate(payload)
    except PydanticValidationError as exc:
        raise ValidationError(pydantic_errors_to_field_errors(exc.errors())) from exc


def validated_body(schema: Type[SchemaT]):
    """Build a FastAPI dependency that validates the JSON body against ``schema``."""

    async def dependency(request: Request) -> SchemaT:
        try:
            payload = await request.json()
        except ValueError as exc:
            raise ValidationError(
                [FieldError(field="body", message="Body harus berupa JSON yang valid")]
            ) from exc
        return validate_payload(schema, payload)

    dependency.__name__ = f"validated_{schema.__name__}"
    return dependency
