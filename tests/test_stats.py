import logging

import pytest

from deckdiffer.analysis.stats import build_full_deck, compute_stats
from deckdiffer.models.card import CardMetadata


class TestBuildFullDeck:
    def test_sums_overlapping_cards(self) -> None:
        assert build_full_deck({"Island": 1, "Sun Titan": 1}, {"Island": 3}) == {
            "Island": 4,
            "Sun Titan": 1,
        }

    def test_inputs_untouched(self) -> None:
        diff_set = {"Island": 1}
        build_full_deck(diff_set, {"Island": 3})
        assert diff_set == {"Island": 1}


class TestComputeStats:
    def test_full_statistics(self, card_catalog: dict[str, CardMetadata]) -> None:
        stats = compute_stats(
            {"Sun Titan": 1, "Counterspell": 2},
            {"Island": 3, "Sol Ring": 1},
            card_catalog.get,
        )

        assert stats.full_deck == {"Sun Titan": 1, "Counterspell": 2, "Island": 3, "Sol Ring": 1}
        assert stats.total_cost == pytest.approx(6.75)
        assert stats.only_diff_cost == pytest.approx(4.50)
        assert stats.mana.total_cmc == pytest.approx(11.0)
        assert stats.mana.total_cards == 4
        assert stats.mana.average_cmc == pytest.approx(2.75)
        assert stats.mana.total_pips == {"W": 2, "U": 4, "B": 0, "R": 0, "G": 0, "C": 5}

    def test_empty_deck(self, card_catalog: dict[str, CardMetadata]) -> None:
        stats = compute_stats({}, {}, card_catalog.get)

        assert stats.full_deck == {}
        assert stats.total_cost == 0.0
        assert stats.only_diff_cost == 0.0
        assert stats.mana.total_cmc == 0.0
        assert stats.mana.total_cards == 0
        assert stats.mana.average_cmc == 0.0
        assert stats.mana.total_pips == {"W": 0, "U": 0, "B": 0, "R": 0, "G": 0, "C": 0}

    def test_lands_cost_but_no_mana(self, card_catalog: dict[str, CardMetadata]) -> None:
        stats = compute_stats({"Mountain": 4}, {}, card_catalog.get)

        assert stats.total_cost == pytest.approx(1.0)
        assert stats.mana.total_cards == 0
        assert stats.mana.total_cmc == 0.0
        assert stats.mana.average_cmc == 0.0

    def test_unknown_card_contributes_nothing(
        self, card_catalog: dict[str, CardMetadata], caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.DEBUG, logger="deckdiffer.analysis.stats"):
            stats = compute_stats({"Mystery Card": 3, "Sol Ring": 1}, {}, card_catalog.get)

        assert stats.full_deck == {"Mystery Card": 3, "Sol Ring": 1}
        assert stats.total_cost == pytest.approx(1.50)
        assert stats.mana.total_cards == 1
        assert "Skipped 1 cards" in caplog.text

    def test_only_diff_cost_prices_merged_count(
        self, card_catalog: dict[str, CardMetadata]
    ) -> None:
        """A card both unique and shared is priced at its full deck count."""
        stats = compute_stats({"Island": 1}, {"Island": 3}, card_catalog.get)

        assert stats.full_deck == {"Island": 4}
        assert stats.only_diff_cost == pytest.approx(1.0)
        assert stats.total_cost == pytest.approx(1.0)

    def test_shared_cards_excluded_from_only_diff_cost(
        self, card_catalog: dict[str, CardMetadata]
    ) -> None:
        stats = compute_stats({}, {"Sol Ring": 2}, card_catalog.get)

        assert stats.total_cost == pytest.approx(3.0)
        assert stats.only_diff_cost == 0.0

    def test_non_positive_counts_skipped(self, card_catalog: dict[str, CardMetadata]) -> None:
        stats = compute_stats({"Sol Ring": 0, "Sun Titan": -1}, {}, card_catalog.get)

        assert stats.total_cost == 0.0
        assert stats.mana.total_cards == 0

    def test_blank_names_skipped(self) -> None:
        bolt = CardMetadata(
            types=("Instant",), primary_type="Instant", price=1.0, cmc=1.0, pip_counts={"R": 1}
        )

        stats = compute_stats({"": 2}, {}, lambda _name: bolt)

        assert stats.total_cost == 0.0
        assert stats.only_diff_cost == 0.0
        assert stats.mana.total_cards == 0
        assert stats.mana.total_pips["R"] == 0

    def test_unknown_pip_keys_ignored(self) -> None:
        odd = CardMetadata(types=("Sorcery",), cmc=1.0, pip_counts={"X": 2, "R": 1})

        stats = compute_stats({"Odd Spell": 1}, {}, lambda _name: odd)

        assert "X" not in stats.mana.total_pips
        assert stats.mana.total_pips["R"] == 1

    def test_none_is_a_contract_violation(self, card_catalog: dict[str, CardMetadata]) -> None:
        with pytest.raises(TypeError):
            compute_stats(None, {}, card_catalog.get)  # type: ignore[arg-type]
