"""Domain layer: instants, unit disambiguation, datetime parsing, rendering."""
