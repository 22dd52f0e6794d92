"""Service for validating profile form values."""

import re
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple, Union
from profile_form.models.form_models import FieldId, Gender, ValidationResult, field_key
from profile_form.utils.logger import get_logger

logger = get_logger(__name__)

EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
MOBILE_PATTERN = re.compile(r"[6-9][0-9]{9}")
PASSWORD_MIN_LENGTH = 8
PASSWORD_SPECIAL_CHARACTERS = frozenset("@_$#&*")

# A check receives (value, all values) and returns True when the value passes
Check = Callable[[Any, Mapping[str, Any]], bool]
Rule = Tuple[Check, str]

# Fields to re-validate when the key field changes
DEPENDENT_FIELDS: Dict[str, Tuple[str, ...]] = {
    FieldId.PASSWORD.value: (FieldId.CONFIRM_PASSWORD.value,),
    FieldId.HAS_EXPERIENCE.value: (FieldId.EXPERIENCE_DETAILS.value,),
}


def _filled(value: Any, values: Mapping[str, Any]) -> bool:
    return bool(str(value or "").strip())


def _matches(pattern: "re.Pattern[str]") -> Check:
    return lambda value, values: bool(pattern.fullmatch(value or ""))


def _contains(predicate: Callable[[str], bool]) -> Check:
    return lambda value, values: any(predicate(char) for char in value or "")


def _same_as_password(value: Any, values: Mapping[str, Any]) -> bool:
    return value == values.get(FieldId.PASSWORD.value, "")


def _known_gender(value: Any, values: Mapping[str, Any]) -> bool:
    return value in {gender.value for gender in Gender}


def _has_skills(value: Any, values: Mapping[str, Any]) -> bool:
    return bool(value)


def _skills_not_blank(value: Any, values: Mapping[str, Any]) -> bool:
    return all(isinstance(skill, str) and skill.strip() for skill in value or ())


def _experience_described(value: Any, values: Mapping[str, Any]) -> bool:
    if not values.get(FieldId.HAS_EXPERIENCE.value, False):
        return True
    return _filled(value, values)


# Rules per field, checked in order; the first failure is reported
RULES: Dict[str, List[Rule]] = {
    FieldId.NAME.value: [
        (_filled, "Name is required"),
    ],
    FieldId.EMAIL.value: [
        (_filled, "Email is required"),
        (_matches(EMAIL_PATTERN), "Invalid email"),
    ],
    FieldId.MOBILE.value: [
        (_filled, "Mobile number is required"),
        (_matches(MOBILE_PATTERN), "Enter valid 10-digit number"),
    ],
    FieldId.PASSWORD.value: [
        (_filled, "Password is required"),
        (lambda value, values: len(value) >= PASSWORD_MIN_LENGTH, "Min 8 characters"),
        (_contains(lambda char: "A" <= char <= "Z"), "At least one uppercase"),
        (_contains(lambda char: "a" <= char <= "z"), "At least one lowercase"),
        (_contains(lambda char: "0" <= char <= "9"), "At least one number"),
        (_contains(lambda char: char in PASSWORD_SPECIAL_CHARACTERS), "At least one special character"),
    ],
    FieldId.CONFIRM_PASSWORD.value: [
        (_filled, "Confirm your password"),
        (_same_as_password, "Passwords must match"),
    ],
    FieldId.GENDER.value: [
        (_filled, "Gender is required"),
        (_known_gender, "Select a valid gender"),
    ],
    FieldId.LOCATION.value: [
        (_filled, "Location is required"),
    ],
    FieldId.EDUCATION.value: [
        (_filled, "Education is required"),
    ],
    FieldId.SKILLS.value: [
        (_has_skills, "Please enter at least one skill"),
        (_skills_not_blank, "Skill cannot be empty"),
    ],
    FieldId.EXPERIENCE_DETAILS.value: [
        (_experience_described, "Experience details required"),
    ],
}


class ValidationEngine:
    """Evaluates the field rules against a candidate value set."""

    def __init__(
        self,
        rules: Optional[Dict[str, List[Rule]]] = None,
        dependents: Optional[Dict[str, Tuple[str, ...]]] = None
    ):
        """
        Initialize the validation engine.

        Args:
            rules: Rule table keyed by field name. Defaults to RULES
            dependents: Re-validation trigger list. Defaults to DEPENDENT_FIELDS
        """
        self.rules = RULES if rules is None else rules
        self.dependents = DEPENDENT_FIELDS if dependents is None else dependents

    @property
    def validated_fields(self) -> Tuple[str, ...]:
        return tuple(self.rules)

    def dependents_of(self, field: Union[FieldId, str]) -> Tuple[str, ...]:
        """Fields whose validity must be re-derived when `field` changes."""
        return self.dependents.get(field_key(field), ())

    def validate_field(self, field: Union[FieldId, str], values: Mapping[str, Any]) -> Optional[str]:
        """
        Validate one field against the current values.

        Args:
            field: Field to check
            values: All candidate values, keyed by field name

        Returns:
            Optional[str]: First failing rule's message, or None when valid
        """
        key = field_key(field)
        value = values.get(key)
        for check, message in self.rules.get(key, ()):
            if not check(value, values):
                return message
        return None

    def validate(self, values: Mapping[str, Any]) -> ValidationResult:
        """Validate every field that carries rules."""
        errors = {field: self.validate_field(field, values) for field in self.rules}
        return ValidationResult(errors=errors)

    def revalidate(
        self,
        field: Union[FieldId, str],
        values: Mapping[str, Any],
        result: ValidationResult
    ) -> ValidationResult:
        """
        Re-derive the outcome of a changed field and of its dependents.

        Args:
            field: Field whose value just changed
            values: All candidate values after the change
            result: Result before the change

        Returns:
            ValidationResult: Updated result; `result` itself is unchanged
        """
        key = field_key(field)
        affected = ([key] if key in self.rules else []) + list(self.dependents_of(key))
        for name in affected:
            result = result.with_field(name, self.validate_field(name, values))
        logger.debug("Revalidated %s", ", ".join(affected) or "nothing")
        return result

    def is_valid(self, values: Mapping[str, Any]) -> bool:
        return self.validate(values).is_valid
