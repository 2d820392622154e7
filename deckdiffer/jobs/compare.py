"""
Compare two decklist files from the command line.

Usage:
    python -m deckdiffer.jobs.compare base.txt upgraded.txt --output-dir out/

Writes the plain and detailed export files into the output directory.
"""

import argparse
import asyncio
import logging
from pathlib import Path

from deckdiffer.models.comparison import DeckComparison, DeckStat
from deckdiffer.services.card_provider import ScryfallMetadataProvider
from deckdiffer.services.comparison import run_comparison
from deckdiffer.services.exporter import build_export_files

logger = logging.getLogger(__name__)


def _log_stats(label: str, stats: DeckStat) -> None:
    logger.info(
        "%s: total $%.2f, unique cards $%.2f, average CMC %.2f, pips %s",
        label,
        stats.total_cost,
        stats.only_diff_cost,
        stats.mana.average_cmc,
        stats.mana.total_pips,
    )


async def run_compare(
    deck1_path: Path,
    deck2_path: Path,
    output_dir: Path,
    provider: ScryfallMetadataProvider | None = None,
) -> DeckComparison:
    """
    Compare two decklist files and write the export files.

    Args:
        deck1_path: First decklist
        deck2_path: Second decklist
        output_dir: Directory for the export files (created if missing)
        provider: Metadata provider. A fresh Scryfall provider if omitted.

    Returns:
        The completed comparison
    """
    deck1_text = deck1_path.read_text(encoding="utf-8")
    deck2_text = deck2_path.read_text(encoding="utf-8")

    comparison = await run_comparison(
        deck1_text,
        deck2_text,
        provider or ScryfallMetadataProvider(),
    )

    for delta_type, delta in comparison.diff.type_delta.items():
        logger.info("%s: %d -> %d (%+d)", delta_type, delta.count_a, delta.count_b, delta.change)
    _log_stats("Deck 1", comparison.deck1_stats)
    _log_stats("Deck 2", comparison.deck2_stats)

    output_dir.mkdir(parents=True, exist_ok=True)
    for file_name, content in build_export_files(comparison).items():
        path = output_dir / file_name
        path.write_text(content, encoding="utf-8")
        logger.info("Wrote %s", path)

    return comparison


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(description="Compare two decklists")
    parser.add_argument("deck1", type=Path, help="First decklist file")
    parser.add_argument("deck2", type=Path, help="Second decklist file")
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path("."),
        help="Directory for export files (default: current directory)",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    asyncio.run(run_compare(args.deck1, args.deck2, args.output_dir))


if __name__ == "__main__":
    main()
