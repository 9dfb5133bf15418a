"""
Localized stop-criterion messages.

Usage:
    get_string("leveloutofbounds", level=12)
    get_string("maxquestattempted", lang="de")
"""

from typing import Optional

from .config import config

STRINGS = {
    "en": {
        "leveloutofbounds": "Requested level {level} out of bounds for the attempt",
        "maxquestattempted": "Maximum number of questions attempted",
        "errorattemptstate": "There was an error with the state of the attempt",
        "errorfetchingquest": "Unable to fetch a question for level {level}",
    },
    "de": {
        "leveloutofbounds": "Angeforderte Stufe {level} liegt außerhalb der Grenzen des Versuchs",
        "maxquestattempted": "Maximale Anzahl an Fragen erreicht",
        "errorattemptstate": "Der Zustand des Versuchs ist fehlerhaft",
        "errorfetchingquest": "Für Stufe {level} konnte keine Frage abgerufen werden",
    },
}


def get_string(identifier: str, level: Optional[int] = None, lang: Optional[str] = None) -> str:
    """
    Look up a message, falling back to English for unknown languages.

    Raises:
        KeyError: If the identifier is unknown
    """
    catalog = STRINGS.get(lang or config.engine.language, STRINGS["en"])
    template = catalog[identifier]
    return template.format(level=level)
