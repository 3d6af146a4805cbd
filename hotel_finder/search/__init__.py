"""Query translation and deterministic filtering.

The search layer turns a free-text request into a strict `HotelFilter`, applies it to the in-memory
dataset, and post-processes the matches according to intents detected in the raw text.
"""
