"""Spam scoring domain service.

A fixed, deterministic heuristic: the same content, account age and
pattern lists always produce the same score. There is no learning and no
I/O.
"""

import re
from datetime import datetime, timedelta

import logfire

from blog.config import ModerationSettings

from .base import Service

# Each match in any group adds KEYWORD_WEIGHT points. Word boundaries are
# ASCII-only, so accented letters never count as part of a word.
SUSPICIOUS_PATTERNS: tuple[re.Pattern[str], ...] = (
    # Promotional bait
    re.compile(
        r"\b(?:buy|cheap|discount|offer|limited|act now|click here)\b",
        re.I | re.ASCII,
    ),
    # Disallowed product categories
    re.compile(r"\b(?:viagra|casino|loan|debt|weight loss)\b", re.I | re.ASCII),
    # Bare URL and domain mentions
    re.compile(r"\b(?:http|www|\.com|\.net|\.org)\b", re.I | re.ASCII),
    # Money bait
    re.compile(r"\b(?:free|money|cash|earn|income)\b", re.I | re.ASCII),
)
LINK_PATTERN = re.compile(r"https?://\S+")
UPPERCASE_PATTERN = re.compile(r"[A-Z]")

KEYWORD_WEIGHT = 10
LINK_LIMIT = 2
LINK_WEIGHT = 15
CAPS_RATIO_LIMIT = 0.7
CAPS_PENALTY = 20
REPETITION_RATIO_LIMIT = 0.3
REPETITION_PENALTY = 25
NEW_ACCOUNT_PENALTY = 15
MAX_SCORE = 100


def keyword_score(content: str) -> int:
    """Points from the suspicious keyword groups alone."""
    return sum(
        KEYWORD_WEIGHT * len(pattern.findall(content))
        for pattern in SUSPICIOUS_PATTERNS
    )


def link_score(content: str) -> int:
    links = len(LINK_PATTERN.findall(content))
    return LINK_WEIGHT * links if links > LINK_LIMIT else 0


def text_length(content: str) -> int:
    """Length in UTF-16 code units, so astral characters such as emoji count twice."""
    return len(content.encode("utf-16-le", "surrogatepass")) // 2


def caps_score(content: str) -> int:
    if not content:
        return 0
    ratio = len(UPPERCASE_PATTERN.findall(content)) / text_length(content)
    return CAPS_PENALTY if ratio > CAPS_RATIO_LIMIT else 0


def repetition_score(content: str) -> int:
    words = content.lower().split()
    if not words:
        return 0
    ratio = len(set(words)) / len(words)
    return REPETITION_PENALTY if ratio < REPETITION_RATIO_LIMIT else 0


class SpamService(Service):
    """Domain service scoring comment submissions from 0 (clean) to 100."""

    def __init__(self, moderation_settings: ModerationSettings) -> None:
        """Initialize spam service.

        Args:
            moderation_settings: Moderation policy (new-account window)
        """
        self.new_account_window = timedelta(
            hours=moderation_settings.new_account_hours
        )

    def is_new_account(
        self, account_created_at: datetime | None, now: datetime | None = None
    ) -> bool:
        """Whether the account falls inside the new-account window."""
        if account_created_at is None:
            return False
        # Compare in the account timestamp's own timezone (None for naive)
        current = now or datetime.now(account_created_at.tzinfo)
        return current - account_created_at < self.new_account_window

    def score(
        self,
        content: str,
        account_created_at: datetime | None,
        now: datetime | None = None,
    ) -> int:
        """Score ``content`` submitted by an account created at ``account_created_at``.

        Args:
            content: Comment text
            account_created_at: Submitter's account creation time (None skips
                the new-account check)
            now: Reference time for the account age check

        Returns:
            Spam score clamped to [0, 100]
        """
        total = (
            keyword_score(content)
            + link_score(content)
            + caps_score(content)
            + repetition_score(content)
        )
        if self.is_new_account(account_created_at, now):
            total += NEW_ACCOUNT_PENALTY

        clamped = max(0, min(total, MAX_SCORE))
        logfire.debug(
            "Spam score computed",
            raw_score=total,
            score=clamped,
            content_length=len(content),
        )
        return clamped
