"""Hotel dataset: immutable records and the CSV loader that produces them."""
