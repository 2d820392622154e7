from deckdiffer.parsers.decklist import normalize_names, parse_decklist, sum_counts

__all__ = [
    "normalize_names",
    "parse_decklist",
    "sum_counts",
]
