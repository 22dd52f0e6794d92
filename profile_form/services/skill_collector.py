"""Service for collecting free-text skill tags."""

from typing import Callable, List, Optional, Tuple
from profile_form.utils.logger import get_logger

logger = get_logger(__name__)

SkillsListener = Callable[[Tuple[str, ...]], None]


class SkillTagCollector:
    """Ordered, de-duplicated set of skill tags entered one at a time."""

    def __init__(self, on_change: Optional[SkillsListener] = None):
        """
        Initialize the collector.

        Args:
            on_change: Called with the new skill tuple after every
                mutation that actually changed the set
        """
        self._skills: List[str] = []
        self._buffer = ""
        self.on_change = on_change

    @property
    def skills(self) -> Tuple[str, ...]:
        return tuple(self._skills)

    @property
    def buffer(self) -> str:
        return self._buffer

    def set_buffer(self, text: str) -> None:
        """Replace the pending text of the tag input."""
        self._buffer = text or ""

    def add(self, raw_input: str) -> Tuple[str, ...]:
        """
        Append a skill unless it is blank or already present.

        Args:
            raw_input: Text as typed; surrounding whitespace is ignored

        Returns:
            Tuple[str, ...]: The resulting skill set
        """
        skill = (raw_input or "").strip()
        if not skill or skill in self._skills:
            return self.skills

        self._skills.append(skill)
        logger.debug("Skill added, %d skill(s) held", len(self._skills))
        self._notify()
        return self.skills

    def remove(self, skill: str) -> Tuple[str, ...]:
        """
        Remove the entry exactly equal to `skill`; no-op when absent.

        Returns:
            Tuple[str, ...]: The resulting skill set
        """
        if skill not in self._skills:
            return self.skills

        self._skills.remove(skill)
        logger.debug("Skill removed, %d skill(s) held", len(self._skills))
        self._notify()
        return self.skills

    def commit(self) -> Tuple[str, ...]:
        """
        Add the buffered text as a skill, then clear the buffer.

        The buffer is cleared whether or not the add succeeded, so a
        duplicate entry simply disappears from the input.
        """
        if self._buffer.strip():
            self.add(self._buffer)
            self._buffer = ""
        return self.skills

    def clear(self) -> None:
        """Drop all skills and the pending buffer without notifying."""
        self._skills = []
        self._buffer = ""

    def _notify(self) -> None:
        if self.on_change is not None:
            self.on_change(self.skills)
