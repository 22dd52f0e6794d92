"""Service for keeping accepted form submissions in memory."""

from typing import Iterator, List, Tuple
from profile_form.models.form_models import FormSnapshot
from profile_form.utils.logger import get_logger

logger = get_logger(__name__)


class SubmissionStore:
    """Append-only, insertion-ordered history of submitted snapshots."""

    def __init__(self):
        self._history: List[FormSnapshot] = []

    def append(self, snapshot: FormSnapshot) -> None:
        """
        Add a snapshot to the end of the history.

        Identical submissions are all kept.

        Raises:
            TypeError: If `snapshot` is not a FormSnapshot
        """
        if not isinstance(snapshot, FormSnapshot):
            raise TypeError(f"Expected FormSnapshot, got {type(snapshot).__name__}")
        self._history.append(snapshot)
        logger.info("Submission accepted, %d in history", len(self._history))

    def list(self) -> Tuple[FormSnapshot, ...]:
        return tuple(self._history)

    def __len__(self) -> int:
        return len(self._history)

    def __iter__(self) -> Iterator[FormSnapshot]:
        return iter(self.list())
