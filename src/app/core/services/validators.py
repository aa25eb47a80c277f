"""
Validation rules for the client form.

Each predicate is pure and returns a boolean verdict over a raw field value.
validate_client_form applies them in a fixed order and raises on the first
violated rule.
"""
import re
from datetime import date

from src.app.core.domain.models import ClientFields, ClientForm, Gender
from src.shared.exceptions import ClientValidationError

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.(com|edu)$", re.IGNORECASE)
NON_DIGIT_PATTERN = re.compile(r"[^0-9]")
INTEGER_PATTERN = re.compile(r"^[+-]?[0-9]+$")
ISO_DATE_PATTERN = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")

MIN_AGE = 5
MAX_AGE = 120
PHONE_DIGITS = 11

REQUIRED_FIELDS_MESSAGE = "Please fill in all required fields."
EMAIL_MESSAGE = "Please enter a valid email address ending in .com or .edu"
AGE_MESSAGE = f"Age must be between {MIN_AGE} and {MAX_AGE} years old."
GENDER_MESSAGE = "Please select a valid gender."
PHONE_MESSAGE = f"Phone number must be exactly {PHONE_DIGITS} digits."
START_DATE_MESSAGE = "Membership Start Date cannot be in the past. Please select today or a future date."
END_DATE_MESSAGE = "Membership End Date must be after the Start Date."


def parse_date(value: str | None) -> date | None:
    """Parse a YYYY-MM-DD string; None when blank or malformed."""
    if not value or not ISO_DATE_PATTERN.match(value.strip()):
        return None
    try:
        return date.fromisoformat(value.strip())
    except ValueError:
        return None


def is_valid_email(email: str | None) -> bool:
    if not email or not isinstance(email, str):
        return False
    return EMAIL_PATTERN.match(email.strip()) is not None


def is_valid_age(age: str | int | None) -> bool:
    """Age must be an integer in [5, 120]; callers skip this check when age is blank."""
    if age is None or age == "":
        return False
    text = str(age).strip()
    if not INTEGER_PATTERN.match(text):
        return False
    return MIN_AGE <= int(text) <= MAX_AGE


def is_valid_gender(gender: str | None) -> bool:
    if not gender:
        return True
    return gender in {g.value for g in Gender}


def is_valid_phone(phone: str | None) -> bool:
    """Exactly 11 digits once every non-digit character is stripped."""
    if not phone or not isinstance(phone, str):
        return False
    return len(NON_DIGIT_PATTERN.sub("", phone)) == PHONE_DIGITS


def is_date_not_in_past(value: str | None, today: date) -> bool:
    """True when the date is today or later, compared by calendar day."""
    parsed = parse_date(value)
    if parsed is None:
        return False
    return parsed >= today


def is_end_date_after_start_date(start_date: str | None, end_date: str | None) -> bool:
    start = parse_date(start_date)
    end = parse_date(end_date)
    if start is None or end is None:
        return False
    return end > start


def resolve_goal(form: ClientForm) -> str:
    """Free text wins over the dropdown when both are set."""
    return form.goal_free.strip() or form.goal_choice.strip()


def validate_client_form(form: ClientForm, today: date) -> ClientFields:
    """
    Validate raw form fields and parse them into ClientFields.

    Presence of every required field is checked before any format rule.

    Args:
        form: Raw form values
        today: Current calendar date, used for the start date rule

    Returns:
        Parsed and trimmed field values

    Raises:
        ClientValidationError: With the message of the first violated rule
    """
    full_name = form.full_name.strip()
    age = form.age.strip()
    gender = form.gender.strip()
    email = form.email.strip()
    phone = form.phone.strip()
    goal = resolve_goal(form)
    start_date = form.start_date.strip()
    end_date = form.end_date.strip()

    if not all([full_name, email, phone, goal, start_date, end_date]):
        raise ClientValidationError(REQUIRED_FIELDS_MESSAGE)

    if not is_valid_email(email):
        raise ClientValidationError(EMAIL_MESSAGE, "email")

    if age and not is_valid_age(age):
        raise ClientValidationError(AGE_MESSAGE, "age")

    if not is_valid_gender(gender):
        raise ClientValidationError(GENDER_MESSAGE, "gender")

    if not is_valid_phone(phone):
        raise ClientValidationError(PHONE_MESSAGE, "phone")

    if not is_date_not_in_past(start_date, today):
        raise ClientValidationError(START_DATE_MESSAGE, "start_date")

    if not is_end_date_after_start_date(start_date, end_date):
        raise ClientValidationError(END_DATE_MESSAGE, "end_date")

    return ClientFields(
        full_name=full_name,
        age=int(age) if age else None,
        gender=Gender(gender) if gender else None,
        email=email,
        phone=phone,
        goal=goal,
        start_date=parse_date(start_date),
        end_date=parse_date(end_date),
    )
