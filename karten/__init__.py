"""
Karten - Vocabulary Flashcards in the Terminal

A small tool for learning German words with spaced repetition. New words
are enriched with translations and highlighted word forms scraped from
verbformen.com, and reviewed in order of their mastery score.
"""

__version__ = "0.3.0"
__author__ = "Karten Contributors"
