"""Service owning the profile form state and its submission flow."""

from typing import Any, Dict, FrozenSet, Optional, Set, Tuple, Union
from profile_form.config import FormSettings, get_settings
from profile_form.models.form_models import (
    FieldId,
    FormSnapshot,
    ValidationResult,
    field_key,
    initial_values,
)
from profile_form.services.skill_collector import SkillTagCollector
from profile_form.services.submission_store import SubmissionStore
from profile_form.services.validation_engine import ValidationEngine
from profile_form.utils.logger import get_logger

logger = get_logger(__name__)


class FormStateController:
    """
    Authoritative state of one form session.

    Holds the field values, the touched set, the current validation
    result, the skill tags, the experience flag and the selected file,
    and hands validated snapshots to the session's SubmissionStore.
    After a successful submit the controller is back in a fresh editing
    state.
    """

    def __init__(
        self,
        store: Optional[SubmissionStore] = None,
        engine: Optional[ValidationEngine] = None,
        settings: Optional[FormSettings] = None
    ):
        """
        Initialize the controller.

        Args:
            store: History receiving accepted submissions. A new empty
                store is created if None
            engine: Validation engine (uses the default rules if None)
            settings: Form settings (uses the cached settings if None)
        """
        self.settings = settings or get_settings()
        self.store = store if store is not None else SubmissionStore()
        self.engine = engine or ValidationEngine()
        self.skill_collector = SkillTagCollector(on_change=self._on_skills_changed)
        self.reset()

    @property
    def values(self) -> Dict[str, Any]:
        values = dict(self._values)
        values[FieldId.SKILLS.value] = list(self._values[FieldId.SKILLS.value])
        return values

    @property
    def errors(self) -> ValidationResult:
        return self._errors

    @property
    def touched(self) -> FrozenSet[str]:
        return frozenset(self._touched)

    @property
    def skills(self) -> Tuple[str, ...]:
        return self.skill_collector.skills

    @property
    def skill_buffer(self) -> str:
        return self.skill_collector.buffer

    @property
    def has_experience(self) -> bool:
        return self._values[FieldId.HAS_EXPERIENCE.value]

    @property
    def file_name(self) -> Optional[str]:
        return self._file_name

    @property
    def file_display_name(self) -> str:
        return self._file_name or self.settings.no_file_label

    @property
    def is_dirty(self) -> bool:
        return bool(self._touched)

    @property
    def is_valid(self) -> bool:
        """Submit readiness: every rule passes and the form has been touched."""
        return self.is_dirty and self._errors.is_valid

    @property
    def history(self) -> Tuple[FormSnapshot, ...]:
        return self.store.list()

    def visible_errors(self) -> Dict[str, str]:
        """Errors of the fields the user has interacted with."""
        return {
            field: message
            for field, message in self._errors.errors.items()
            if message and field in self._touched
        }

    def set_field(self, field: Union[FieldId, str], value: Any) -> None:
        """
        Update a field value, mark it touched and re-validate.

        Args:
            field: Field to update
            value: New value (string, or bool for hasExperience)

        Raises:
            ValueError: If the field is unknown or is `skills`, which only
                changes through the tag operations
        """
        key = field_key(field)
        if key == FieldId.HAS_EXPERIENCE.value:
            self.toggle_experience(bool(value))
            return
        if key == FieldId.SKILLS.value:
            raise ValueError("Skills change through commit_skill and remove_skill")

        self._values[key] = "" if value is None else str(value)
        self._touched.add(key)
        self._revalidate(key)

    def set_touched(self, field: Union[FieldId, str]) -> None:
        """Mark a field as interacted with, e.g. when it loses focus."""
        self._touched.add(field_key(field))

    def toggle_experience(self, flag: bool) -> None:
        """Set the experience flag; experienceDetails becomes (not) required."""
        key = FieldId.HAS_EXPERIENCE.value
        self._values[key] = bool(flag)
        self._touched.add(key)
        self._revalidate(key)

    def set_skill_buffer(self, text: str) -> None:
        self.skill_collector.set_buffer(text)

    def commit_skill(self, raw: Optional[str] = None) -> Tuple[str, ...]:
        """
        Commit the pending tag input (or `raw`, which replaces it first).

        The pending input is cleared even when the skill was a duplicate.
        """
        if raw is not None:
            self.skill_collector.set_buffer(raw)
        return self.skill_collector.commit()

    def remove_skill(self, skill: str) -> Tuple[str, ...]:
        return self.skill_collector.remove(skill)

    def select_file(self, name: Optional[str]) -> None:
        """Hold the selected file's name, or clear it with None/empty."""
        self._file_name = name or None

    def attempt_submit(self) -> Optional[FormSnapshot]:
        """
        Submit the form if it is submit-ready.

        Returns:
            Optional[FormSnapshot]: The stored snapshot, or None when the
            form was not ready (nothing changes in that case)
        """
        if not self.is_valid:
            logger.debug("Submit ignored, failing fields: %s", self._errors.failing_fields())
            return None

        snapshot = self._build_snapshot()
        self.store.append(snapshot)
        self.reset()
        return snapshot

    def reset(self) -> None:
        """Return to a pristine editing state."""
        self._values: Dict[str, Any] = initial_values()
        self._touched: Set[str] = set()
        self._file_name: Optional[str] = None
        self.skill_collector.clear()
        self._errors = self.engine.validate(self._values)

    def _build_snapshot(self) -> FormSnapshot:
        data = dict(self._values)
        data[FieldId.SKILLS.value] = tuple(self.skills)
        data["file"] = self.file_display_name
        return FormSnapshot(**data)

    def _revalidate(self, key: str) -> None:
        self._errors = self.engine.revalidate(key, self._values, self._errors)
        # Dependents become display-eligible as soon as their source changes
        self._touched.update(self.engine.dependents_of(key))

    def _on_skills_changed(self, skills: Tuple[str, ...]) -> None:
        key = FieldId.SKILLS.value
        self._values[key] = list(skills)
        self._touched.add(key)
        self._revalidate(key)
