"""Append-only workout session log (one timestamped line per session)."""
import logging
import time
from pathlib import Path
from typing import List, Optional, Union

from fitness.domain.Activity import Activity
from fitness.domain.Profile import Profile
from fitness.events.Event_Bus import SESSION_LOGGED, publish
from fitness.utilities.config import SESSION_LOG_FILE
from fitness.utilities.constants import SESSION_LINE_FORMAT
from fitness.utilities.errors import FitnessError

logger = logging.getLogger(__name__)


def _one_line(text: str) -> str:
    # One session per line: escape line breaks coming from unvalidated names
    return str(text).replace("\r", "\\r").replace("\n", "\\n")


class SessionLogger:
    def __init__(self, path: Optional[Union[str, Path]] = None):
        self.path = Path(path) if path is not None else SESSION_LOG_FILE

    def format_line(self, profile: Profile, activity: Activity, calories: float, ts: Optional[int] = None) -> str:
        if ts is None:
            ts = int(time.time())
        return SESSION_LINE_FORMAT.format(
            ts=ts,
            name=_one_line(profile.name),
            label=_one_line(activity.label),
            minutes=activity.duration_minutes,
            calories=calories,
        )

    def log_session(self, profile: Profile, activity: Activity, calories: Optional[float] = None) -> str:
        '''Appends one session line and returns it. Calories default to the activity estimate.'''
        if calories is None:
            calories = activity.estimate_calories(profile)
        line = self.format_line(profile, activity, calories)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, 'a', encoding='utf-8') as f:
                f.write(line)
        except OSError as e:
            logger.error("Unable to open log file %s: %s", self.path, e)
            raise FitnessError("Unable to open log file") from e
        logger.info("Logged session for %s: %s (%.2f kcal)", profile.name, activity.label, calories)
        publish(SESSION_LOGGED, {
            "profile": profile,
            "activity": activity,
            "calories": calories,
            "line": line,
        })
        return line

    def read_sessions(self) -> List[str]:
        '''Returns the logged lines, oldest first; empty if nothing was logged yet.'''
        if not self.path.exists():
            return []
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                return [line.rstrip("\n") for line in f if line.strip()]
        except OSError as e:
            logger.error("Unable to read log file %s: %s", self.path, e)
            raise FitnessError("Unable to read log file") from e
