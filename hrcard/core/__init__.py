"""Card pipeline: acquisition, extraction, normalization, classification, layout, rendering."""
