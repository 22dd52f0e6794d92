"""Pydantic models for the form layout loaded from YAML."""

from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, Field


class WidgetKind(str, Enum):
    """Input widget used to render a field."""
    
    TEXT = "text"
    PASSWORD = "password"
    RADIO = "radio"
    TEXTAREA = "textarea"


class FieldOption(BaseModel):
    """Selectable option of a radio field."""
    
    value: str
    label: str


class FieldDefinition(BaseModel):
    """Presentation data for a single form field."""
    
    id: str
    label: str
    kind: WidgetKind = WidgetKind.TEXT
    placeholder: Optional[str] = None
    help: Optional[str] = None
    options: List[FieldOption] = Field(default_factory=list)


class FormLayout(BaseModel):
    """Complete form layout model."""
    
    title: str
    submit_label: str = Field("Submit", alias="submitLabel")
    skill_placeholder: str = Field("Type a skill and press Enter", alias="skillPlaceholder")
    experience_label: str = Field("Do you have work experience?", alias="experienceLabel")
    fields: List[FieldDefinition]
    
    class Config:
        """Pydantic config."""
        
        populate_by_name = True
    
    def field(self, field_id: str) -> FieldDefinition:
        """
        Look up a field definition by id.
        
        Raises:
            KeyError: If the layout has no such field
        """
        for definition in self.fields:
            if definition.id == field_id:
                return definition
        raise KeyError(field_id)
