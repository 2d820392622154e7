"""Tests for domain models."""

from dataclasses import FrozenInstanceError

import pytest

from deckdiffer.models import (
    CardMetadata,
    ComparisonNotFoundError,
    EmptyDecklistError,
    FailureKind,
    ManaStats,
    TypeDelta,
    build_display_label,
    parse_display_label,
)


class TestCardMetadata:
    def test_neutral_record(self) -> None:
        neutral = CardMetadata.neutral()

        assert neutral.types == ()
        assert neutral.primary_type == "Other"
        assert neutral.color_category == "Colorless"
        assert neutral.price == 0.0
        assert neutral.cmc == 0.0
        assert dict(neutral.pip_counts) == {"W": 0, "U": 0, "B": 0, "R": 0, "G": 0, "C": 0}
        assert not neutral.is_land

    def test_is_land(self) -> None:
        assert CardMetadata(types=("Artifact", "Land"), primary_type="Land").is_land

    def test_frozen(self) -> None:
        with pytest.raises(FrozenInstanceError):
            CardMetadata.neutral().price = 5.0  # type: ignore[misc]


class TestDisplayLabels:
    def test_build(self) -> None:
        assert build_display_label("Lightning Bolt", 3) == "3 Lightning Bolt"

    def test_parse(self) -> None:
        assert parse_display_label("3 Lightning Bolt") == (3, "Lightning Bolt")
        assert parse_display_label("20 Island") == (20, "Island")

    def test_parse_without_count(self) -> None:
        assert parse_display_label("Island") == (1, "Island")


class TestTypeDelta:
    def test_change(self) -> None:
        assert TypeDelta(count_a=4, count_b=1).change == -3
        assert TypeDelta(count_a=0, count_b=2).change == 2


class TestManaStats:
    def test_average_cmc(self) -> None:
        assert ManaStats(total_cmc=9.0, total_cards=4).average_cmc == pytest.approx(2.25)

    def test_average_cmc_without_cards(self) -> None:
        assert ManaStats().average_cmc == 0.0


class TestKnownErrors:
    def test_empty_decklist(self) -> None:
        error = EmptyDecklistError("Deck 1")

        detail = error.to_detail()
        assert error.status_code == 400
        assert detail.kind == FailureKind.MISSING_REQUIRED
        assert detail.message.startswith("Deck 1 is empty")
        assert detail.suggestion is not None

    def test_comparison_not_found(self) -> None:
        error = ComparisonNotFoundError("abc", "deck1_only.txt")

        assert error.status_code == 404
        assert error.kind == FailureKind.NOT_FOUND
        assert "deck1_only.txt" in (error.detail or "")
