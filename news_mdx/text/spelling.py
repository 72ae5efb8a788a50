"""British to American spelling table used by the default normalizer."""

from __future__ import annotations

# -our nouns: colour -> color
_OUR_STEMS = [
    "arbo", "armo", "behavio", "cando", "clamo", "colo", "demeano", "endeavo",
    "favo", "fervo", "flavo", "harbo", "hono", "humo", "labo", "neighbo",
    "odo", "parlo", "rigo", "rumo", "savo", "splendo", "tumo", "valo", "vapo",
    "vigo",
]

# -ise verbs: organise -> organize
_ISE_STEMS = [
    "apolog", "author", "capital", "categor", "central", "civil", "critic",
    "emphas", "final", "global", "harmon", "hospital", "legal", "legitim",
    "maxim", "memor", "minim", "mobil", "modern", "monopol", "neutral",
    "normal", "optim", "organ", "penal", "popular", "priorit", "privat",
    "real", "recogn", "revital", "standard", "subsid", "summar", "symbol",
    "sympath", "synchron", "util", "visual",
]

# -yse verbs: analyse -> analyze
_YSE_STEMS = ["anal", "catal", "paral"]

# -re nouns: centre -> center
_RE_STEMS = ["cent", "fib", "lit", "lust", "met", "sab", "sepulch", "somb", "spect", "theat"]

# doubled l before a suffix: travelled -> traveled
_DOUBLED_L_STEMS = [
    "cancel", "channel", "counsel", "dial", "duel", "equal", "fuel", "label",
    "level", "marvel", "model", "signal", "total", "travel", "tunnel",
]

_IRREGULAR = {
    "aeroplane": "airplane",
    "aeroplanes": "airplanes",
    "aluminium": "aluminum",
    "catalogue": "catalog",
    "catalogues": "catalogs",
    "defence": "defense",
    "defences": "defenses",
    "dialogue": "dialog",
    "enrol": "enroll",
    "enrolment": "enrollment",
    "fulfil": "fulfill",
    "fulfilment": "fulfillment",
    "grey": "gray",
    "judgement": "judgment",
    "licence": "license",
    "licences": "licenses",
    "manoeuvre": "maneuver",
    "manoeuvres": "maneuvers",
    "mould": "mold",
    "offence": "offense",
    "offences": "offenses",
    "paediatric": "pediatric",
    "plough": "plow",
    "pretence": "pretense",
    "programme": "program",
    "programmes": "programs",
    "pyjamas": "pajamas",
    "sceptic": "skeptic",
    "sceptical": "skeptical",
    "storey": "story",
    "storeys": "stories",
    "tyre": "tire",
    "tyres": "tires",
}


def _build_table() -> dict[str, str]:
    table: dict[str, str] = {}
    for stem in _OUR_STEMS:
        for tail in ("", "s", "ed", "ing", "ite", "ites", "able", "ful"):
            table[stem + "ur" + tail] = stem + "r" + tail
    for stem in _ISE_STEMS:
        for british, american in (
            ("ise", "ize"),
            ("ised", "ized"),
            ("ises", "izes"),
            ("ising", "izing"),
            ("isation", "ization"),
            ("isations", "izations"),
        ):
            table[stem + british] = stem + american
    for stem in _YSE_STEMS:
        for british, american in (("yse", "yze"), ("ysed", "yzed"), ("yses", "yzes"), ("ysing", "yzing")):
            table[stem + british] = stem + american
    for stem in _RE_STEMS:
        table[stem + "re"] = stem + "er"
        table[stem + "res"] = stem + "ers"
    for stem in _DOUBLED_L_STEMS:
        for tail in ("led", "ling", "ler", "lers"):
            table[stem + tail] = stem + tail[1:]
    table.update(_IRREGULAR)
    return table


BRITISH_TO_AMERICAN: dict[str, str] = _build_table()
