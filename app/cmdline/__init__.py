"""Command line options of the player: parsing, help text, hand-off codec."""
