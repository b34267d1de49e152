"""Plain-text rendering of dictionary entries."""

from dictlookup.services.dictionary.base import Definition, Entry, Meaning, Phonetic

BULLET = "\n\t• "


def render_phonetics(phonetics: tuple[Phonetic, ...] | None) -> str:
    """
    Render the bracketed pronunciation list, e.g. "[/dɔɡ/]".

    The segment is emitted only when the first phonetic carries a text;
    later phonetics without one contribute an empty item.
    """
    if not phonetics or phonetics[0].text is None:
        return ""
    return "[" + ", ".join(p.text or "" for p in phonetics) + "]"


def render_definition(definition: Definition) -> str:
    return BULLET + definition.definition


def render_meaning(meaning: Meaning) -> str:
    return "\n" + meaning.part_of_speech + "".join(render_definition(d) for d in meaning.definitions)


def render_entry(entry: Entry) -> str:
    """Render an entry as multi-line text without a trailing newline."""
    return (
        entry.word
        + " "
        + render_phonetics(entry.phonetics)
        + (entry.origin or "")
        + "".join(render_meaning(m) for m in entry.meanings)
    )
