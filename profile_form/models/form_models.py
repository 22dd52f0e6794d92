"""Pydantic models for profile form state and submissions."""

from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, Union
from pydantic import BaseModel, Field


class FieldId(str, Enum):
    """Stable identifiers of the form fields."""
    
    NAME = "name"
    EMAIL = "email"
    MOBILE = "mobile"
    PASSWORD = "password"
    CONFIRM_PASSWORD = "confirmPassword"
    GENDER = "gender"
    LOCATION = "location"
    EDUCATION = "education"
    SKILLS = "skills"
    EXPERIENCE_DETAILS = "experienceDetails"
    HAS_EXPERIENCE = "hasExperience"


class Gender(str, Enum):
    """Gender options offered by the form."""
    
    MALE = "male"
    FEMALE = "female"


# Plain-text fields, in display order
TEXT_FIELDS: Tuple[str, ...] = (
    FieldId.NAME.value,
    FieldId.EMAIL.value,
    FieldId.MOBILE.value,
    FieldId.PASSWORD.value,
    FieldId.CONFIRM_PASSWORD.value,
    FieldId.GENDER.value,
    FieldId.LOCATION.value,
    FieldId.EDUCATION.value,
    FieldId.EXPERIENCE_DETAILS.value,
)


def field_key(field: Union[FieldId, str]) -> str:
    """
    Normalize a field identifier to its plain string name.
    
    Args:
        field: FieldId member or its string value
        
    Returns:
        str: The field's contract name (e.g. "confirmPassword")
        
    Raises:
        ValueError: If the identifier is not a known field
    """
    return FieldId(field).value


def initial_values() -> Dict[str, Any]:
    """Fresh initial value set: empty strings, no skills, no experience."""
    values: Dict[str, Any] = {field: "" for field in TEXT_FIELDS}
    values[FieldId.SKILLS.value] = []
    values[FieldId.HAS_EXPERIENCE.value] = False
    return values


class ValidationResult(BaseModel):
    """Mapping of field name to its current error message (None when valid)."""
    
    errors: Dict[str, Optional[str]] = Field(default_factory=dict)
    
    class Config:
        frozen = True
    
    @property
    def is_valid(self) -> bool:
        return not self.failing_fields()
    
    def error_for(self, field: Union[FieldId, str]) -> Optional[str]:
        """Return the error message for a field, or None if it is valid."""
        return self.errors.get(field_key(field)) or None
    
    def failing_fields(self) -> List[str]:
        return [field for field, message in self.errors.items() if message]
    
    def with_field(self, field: Union[FieldId, str], message: Optional[str]) -> "ValidationResult":
        """
        Copy of this result with one field's outcome replaced.
        
        Args:
            field: Field to update
            message: New error message, or None when the field is valid
            
        Returns:
            ValidationResult: New result; this one is left unchanged
        """
        errors = dict(self.errors)
        errors[field_key(field)] = message or None
        return ValidationResult(errors=errors)


class FormSnapshot(BaseModel):
    """Immutable copy of the form captured at a successful submission."""
    
    name: str
    email: str
    mobile: str
    password: str
    confirm_password: str = Field(alias="confirmPassword")
    gender: str
    location: str
    education: str
    skills: Tuple[str, ...]
    experience_details: str = Field("", alias="experienceDetails")
    has_experience: bool = Field(False, alias="hasExperience")
    file: str
    
    class Config:
        """Pydantic config."""
        
        frozen = True
        populate_by_name = True
    
    @property
    def skills_display(self) -> str:
        return ", ".join(self.skills)
