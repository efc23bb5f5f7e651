"""
Stopword list and membership test.

The list covers German articles, pronouns, prepositions, conjunctions,
modal/auxiliary verbs and common adverbs, plus a short English tail because
German SERPs regularly contain English fragments. All entries are lowercase;
tokens are lowercased before lookup.
"""

from typing import AbstractSet


GERMAN_STOPWORDS: frozenset[str] = frozenset({
    # Articles
    "der", "die", "das", "den", "dem", "des",
    "ein", "eine", "einer", "eines", "einem", "einen",
    # Conjunctions and interrogatives
    "und", "oder", "aber", "doch", "wenn", "weil", "dass", "ob", "als", "wie",
    "was", "wer", "wo", "wann", "warum",
    "welche", "welcher", "welches", "welchen", "welchem",
    # Pronouns
    "ich", "du", "er", "sie", "es", "wir", "ihr",
    "mein", "dein", "sein", "unser", "euer",
    "mir", "dir", "ihm", "uns", "euch", "ihnen",
    "mich", "dich", "ihn",
    # Auxiliary and modal verbs
    "ist", "sind", "war", "waren", "wird", "werden", "wurde", "wurden",
    "hat", "haben", "hatte", "hatten",
    "kann", "können", "konnte", "konnten",
    "muss", "müssen", "musste", "mussten",
    "soll", "sollen", "sollte", "sollten",
    "will", "wollen", "wollte", "wollten",
    "darf", "dürfen", "durfte", "durften",
    "mag", "mögen", "mochte", "mochten", "möchte", "möchten",
    # Adverbs and particles
    "nicht", "auch", "nur", "noch", "schon", "immer", "sehr", "mehr", "viel",
    "so", "ja", "nein", "denn", "dann", "dort", "hier", "jetzt",
    "heute", "gestern", "morgen",
    # Prepositions
    "für", "mit", "bei", "von", "zu", "aus", "nach", "vor", "über", "unter",
    "zwischen", "durch", "gegen", "ohne", "um", "an", "auf", "in", "bis",
    "seit", "während",
    # Determiners and indefinites
    "alle", "alles", "andere", "anderen", "anderer", "anderes",
    "dieser", "diese", "dieses", "diesen", "diesem",
    "jeder", "jede", "jedes", "jeden", "jedem",
    "kein", "keine", "keiner", "keines", "keinen", "keinem",
    "man", "sich", "selbst", "wieder", "ganz", "gar",
    # Abbreviations
    "sowie", "bzw", "usw", "etc", "ggf", "evtl", "ca", "z.b.", "d.h.",
    # English
    "the", "a", "an", "and", "or", "but", "is", "are", "was", "were", "be",
    "been", "to", "of", "in", "for", "on", "with", "at", "by", "from", "as",
    "into", "about",
})


def is_stopword(token: str, stopwords: AbstractSet[str] = GERMAN_STOPWORDS) -> bool:
    """Check whether a token is a stopword (case-insensitive)."""
    return token.lower() in stopwords
