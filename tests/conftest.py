"""Pytest configuration and fixtures."""

from typing import Any

import pytest


@pytest.fixture
def hello_entry_data() -> dict[str, Any]:
    """API entry for "hello" with two phonetics and three meanings."""
    return {
        "word": "hello",
        "phonetics": [
            {
                "text": "/həˈloʊ/",
                "audio": "https://lex-audio.useremarkable.com/mp3/hello_us_1_rr.mp3",
            },
            {
                "text": "/hɛˈloʊ/",
                "audio": "https://lex-audio.useremarkable.com/mp3/hello_us_2_rr.mp3",
            },
        ],
        "meanings": [
            {
                "partOfSpeech": "noun",
                "definitions": [
                    {
                        "definition": "An utterance of “hello”; a greeting.",
                        "synonyms": [
                            "greeting",
                            "welcome",
                            "salutation",
                            "saluting",
                            "hailing",
                            "address",
                            "hello",
                            "hallo",
                        ],
                        "example": "she was getting polite nods and hellos from people",
                    }
                ],
            },
            {
                "partOfSpeech": "intransitive verb",
                "definitions": [
                    {
                        "definition": "Say or shout “hello”; greet someone.",
                        "example": "I pressed the phone button and helloed",
                    }
                ],
            },
            {
                "partOfSpeech": "exclamation",
                "definitions": [
                    {
                        "definition": "Used as a greeting or to begin a phone conversation.",
                        "example": "hello there, Katie!",
                    }
                ],
            },
        ],
    }


@pytest.fixture
def dog_entry_data() -> dict[str, Any]:
    """API entry for "dog" with one phonetic and eight definitions."""
    return {
        "word": "dog",
        "phonetics": [
            {
                "text": "/dɔɡ/",
                "audio": "https://lex-audio.useremarkable.com/mp3/dog_us_1_rr.mp3",
            }
        ],
        "meanings": [
            {
                "partOfSpeech": "transitive verb",
                "definitions": [
                    {
                        "definition": "Follow (someone or their movements) closely and persistently.",
                        "synonyms": ["pursue", "follow", "stalk", "track", "trail", "shadow", "hound"],
                        "example": "photographers seemed to dog her every step",
                    },
                    {"definition": "Act lazily; fail to try one's hardest."},
                    {
                        "definition": "Grip (something) with a mechanical device.",
                        "example": "she has dogged the door shut",
                    },
                ],
            },
            {
                "partOfSpeech": "noun",
                "definitions": [
                    {
                        "definition": (
                            "A domesticated carnivorous mammal that typically has a long snout, "
                            "an acute sense of smell, nonretractable claws, and a barking, "
                            "howling, or whining voice."
                        ),
                        "synonyms": ["canine", "hound"],
                        "example": (
                            "‘All dogs have an intense sense of smell, and every dog likes "
                            "to sniff,’ Smith said."
                        ),
                    },
                    {"definition": "An unpleasant, contemptible, or wicked man."},
                    {"definition": "A mechanical device for gripping."},
                    {"definition": "Feet.", "synonyms": ["tootsie", "trotter"]},
                    {"definition": "short for firedog"},
                ],
            },
        ],
    }


@pytest.fixture
def hello_rendered() -> str:
    return (
        "hello [/həˈloʊ/, /hɛˈloʊ/]"
        "\nnoun"
        "\n\t• An utterance of “hello”; a greeting."
        "\nintransitive verb"
        "\n\t• Say or shout “hello”; greet someone."
        "\nexclamation"
        "\n\t• Used as a greeting or to begin a phone conversation."
    )
