"""Unit tests for SpamService."""

from datetime import datetime, timedelta, timezone

import pytest

from blog.config import ModerationSettings
from blog.domain.service import SpamService
from blog.domain.service.spam_service import (
    caps_score,
    keyword_score,
    link_score,
    repetition_score,
    text_length,
)


@pytest.fixture
def spam_service() -> SpamService:
    return SpamService(ModerationSettings())


OLD_ACCOUNT = datetime.now() - timedelta(days=365)


class TestKeywordScore:
    """Keyword heuristics."""

    def test_three_keyword_matches_score_thirty(self):
        assert keyword_score("buy cheap discount") == 30

    def test_matches_are_case_insensitive(self):
        assert keyword_score("FREE Money") == 20

    def test_words_inside_other_words_do_not_match(self):
        # "freedom" and "buying" are not whole-word matches
        assert keyword_score("freedom of buying") == 0

    def test_every_group_contributes(self):
        assert keyword_score("casino cash offer") == 30

    def test_accented_letters_do_not_extend_words(self):
        # Accented letters are not word characters, so "free" stands alone
        assert keyword_score("Tr\u00e8s bonne id\u00e9free") == 10


class TestStructuralScores:
    """Link, capitalisation and repetition heuristics."""

    def test_two_links_are_tolerated(self):
        assert link_score("see https://a.io and https://b.io") == 0

    def test_three_links_score_per_link(self):
        content = "https://a.io https://b.io https://c.io"
        assert link_score(content) == 45

    def test_mostly_uppercase_is_penalised(self):
        assert caps_score("AAAAAAAAAA") == 20
        assert caps_score("Hello there") == 0

    def test_caps_ratio_counts_emoji_as_two_units(self):
        # 8 capitals over 12 UTF-16 units is below the limit
        assert text_length("ABCDEFGH\U0001F600\U0001F600") == 12
        assert caps_score("ABCDEFGH\U0001F600\U0001F600") == 0

    def test_repetition_is_penalised(self):
        assert repetition_score("spam spam spam spam spam spam spam spam") == 25
        assert repetition_score("every word here is different") == 0


class TestSpamService:
    """Tests for the combined score."""

    def test_clean_content_scores_zero(self, spam_service):
        score = spam_service.score("I enjoyed reading this article.", OLD_ACCOUNT)
        assert score == 0

    def test_new_account_adds_penalty(self, spam_service):
        # Arrange
        now = datetime.now()
        fresh = now - timedelta(hours=2)

        # Act
        score = spam_service.score("Thanks for sharing", fresh, now=now)

        # Assert
        assert score == 15

    def test_account_outside_window_is_not_new(self, spam_service):
        now = datetime.now()
        assert not spam_service.is_new_account(now - timedelta(hours=25), now)
        assert spam_service.is_new_account(now - timedelta(hours=23), now)

    def test_unknown_account_age_skips_penalty(self, spam_service):
        assert spam_service.score("Thanks for sharing", None) == 0

    def test_timezone_aware_account_timestamps(self, spam_service):
        created = datetime.now(timezone.utc) - timedelta(hours=1)
        assert spam_service.is_new_account(created)

    def test_score_is_clamped_to_one_hundred(self, spam_service):
        # Arrange
        content = " ".join(["BUY CHEAP CASINO FREE CASH"] * 10)

        # Act
        score = spam_service.score(content, OLD_ACCOUNT)

        # Assert
        assert score == 100

    def test_score_is_deterministic(self, spam_service):
        content = "Earn money fast at www.example.com"
        now = datetime.now()
        first = spam_service.score(content, OLD_ACCOUNT, now=now)
        second = spam_service.score(content, OLD_ACCOUNT, now=now)
        assert first == second

    def test_new_account_window_follows_settings(self):
        service = SpamService(ModerationSettings(new_account_hours=1))
        now = datetime.now()
        assert not service.is_new_account(now - timedelta(hours=2), now)
