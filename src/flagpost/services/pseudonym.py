"""Deterministic anonymised handles derived from identity provider ids."""

from __future__ import annotations

import secrets

# Order, length and repeated entries are part of the handle derivation; do not edit.
ADJECTIVES = (
    "Silent", "Brave", "Clever", "Swift", "Mighty", "Bold", "Lucky", "Happy", "Quiet",
    "Fierce", "Gentle", "Crazy", "Sly", "Wild", "Calm", "Wise", "Bright", "Lucky",
    "Strong", "Charming", "Smart", "Quick", "Kind", "Loyal", "Fearless", "Sharp",
    "Brilliant", "Noble", "Daring", "Witty", "Honest", "Caring", "Jolly", "Vigilant",
    "Bravehearted", "Patient", "Energetic", "Serene", "Fiery", "Luminous", "Valiant",
    "Gallant", "Majestic", "Radiant", "Steady", "Tenacious", "Gracious", "Dynamic",
    "Humble", "Cheerful", "Courageous", "Devoted", "Adventurous", "Boldhearted",
    "Wiseheart", "Gentlemanly", "Harmonious", "Nimble", "Curious", "Lively",
    "Observant", "Playful", "Resourceful", "Sincere", "Trusty", "Fearlessheart",
    "Bravura", "Gallantheart", "Dashing", "Merry", "Chipper", "Radiantheart", "Fabled",
    "Gallantman", "Heroic", "Zesty", "Cunning", "Vigorous", "Righteous",
    "Brilliantmind", "Dapper", "Valorous", "Gleaming", "Kindhearted", "Brighthearted",
    "Cheerfulmind", "Cleverheart", "Majesticmind", "Humbleheart", "Livelyheart",
    "Nobleheart", "Fieryheart", "Quickmind", "Sage", "Energeticmind", "Luminousmind",
    "Playfulmind", "Boldmind", "Fiercemind", "Sharpmind", "Radiantmind", "Curiousmind",
    "Steadfast", "Valiantmind", "Daringmind", "Honestmind", "Wittymind",
    "Fearlessmind", "Adventurousmind", "Gentlemind", "Bravebrain", "Caringmind",
    "Harmoniousmind", "Dynamicmind", "Cheerfulbrain", "Gleeful", "Observantmind",
    "Nimblemind", "Resourcefulmind", "Trustymind", "Tenaciousmind", "Dashingmind",
    "Heroicmind", "Zestful", "Gallantbrain", "Sagebrain", "Fierybrain", "Brightbrain",
    "Cleverbrain", "Boldbrain", "Gentlebrain", "Radiantbrain", "Playfulbrain",
    "Noblebrain", "Brilliantbrain", "Sharpbrain", "Kindbrain", "Courageousbrain",
    "Livelybrain", "Mightybrain", "Cheerfulheart", "Adventurousheart", "Dynamicheart",
    "Humblebrain", "Wittybrain", "Sageheart", "Gallantheart", "Radiantbrain",
    "Valiantheart", "Cunningmind", "Fearlessheart2", "Braveheart2", "Nobleheart2",
    "Cleverheart2", "Fieryheart2", "Merryheart",
)

NOUNS = (
    "Tiger", "Falcon", "Lion", "Wolf", "Eagle", "Shark", "Panther", "Fox", "Bear",
    "Dragon", "Hawk", "Raven", "Cobra", "Jaguar", "Viper", "Otter", "Leopard",
    "Cheetah", "Panthera", "Cougar", "Lynx", "Grizzly", "Jaguarundi", "Wolfman",
    "Hawkeye", "Eagleheart", "Falconer", "Dragonheart", "Sharkfin", "Otterly",
    "Ravenclaw", "CobraKing", "Tigerclaw", "Lionheart", "Foxfire", "Bearclaw",
    "Hawkeye2", "Falconwing", "Wolfpack", "Pantherclaw", "Jaguarpaw", "Viperstrike",
    "Ottermind", "Eagleray", "Cheetahspeed", "Cougarclaw", "Lynxeye", "Grizzlybear",
    "Leopardman", "Pantherpaw", "Jaguarfang", "Wolffang", "Dragonfang", "Hawkwing",
    "Ravenwing", "Tigerfang", "Lionfang", "Foxpaw", "Bearpaw", "Cobrafang",
    "Otterfang", "Falconfang", "Eaglefang", "Pantherfang", "Jaguarclaw", "Viperfang",
    "Otterclaw", "Leopardfang", "Cougarfang", "Lynxfang", "Grizzlyclaw", "Hawkeyeclaw",
    "Cheetahfang", "Dragonclaw", "Ravenclaw2", "Tigerclaw2", "Lionclaw", "Foxclaw",
    "Bearclaw2", "Falconclaw", "Eagleclaw", "Pantherclaw2", "Jaguarclaw2", "Viperclaw",
    "Otterclaw2", "Hawkclaw", "CobraClaw2", "Wolfclaw", "Lynxclaw2", "Grizzlyclaw2",
    "Leopardclaw2", "Cougarclaw2", "Cheetahclaw", "Dragonclaw2", "Ravenclaw3",
    "Tigerclaw3", "Lionclaw2", "Foxclaw2", "Bearclaw3", "Falconclaw2", "Eagleclaw2",
    "Pantherclaw3", "Jaguarclaw3", "Viperclaw2", "Otterclaw3", "Hawkclaw2",
    "CobraClaw3", "Wolfclaw2", "Lynxclaw3", "Grizzlyclaw3", "Leopardclaw3",
    "Cougarclaw3", "Cheetahclaw2", "Dragonclaw3", "Ravenclaw4", "Tigerclaw4",
    "Lionclaw3", "Foxclaw3", "Bearclaw4", "Falconclaw3", "Eagleclaw3", "Pantherclaw4",
    "Jaguarclaw4", "Viperclaw3", "Otterclaw4", "Hawkclaw3", "CobraClaw4", "Wolfclaw3",
    "Lynxclaw4", "Grizzlyclaw4", "Leopardclaw4", "Cougarclaw4", "Cheetahclaw3",
    "Dragonclaw4", "Ravenclaw5", "Tigerclaw5", "Lionclaw4", "Foxclaw4", "Bearclaw5",
    "Falconclaw4", "Eagleclaw4", "Pantherclaw5", "Jaguarclaw5", "Viperclaw4",
    "Otterclaw5", "Hawkclaw4", "CobraClaw5", "Wolfclaw4", "Lynxclaw5", "Grizzlyclaw5",
    "Leopardclaw5", "Cougarclaw5", "Cheetahclaw4", "Dragonclaw5", "Ravenclaw6",
    "Tigerclaw6", "Lionclaw5", "Foxclaw5", "Bearclaw6", "Falconclaw5", "Eagleclaw5",
    "Pantherclaw6", "Jaguarclaw6", "Viperclaw5", "Otterclaw6", "Hawkclaw5",
    "CobraClaw6", "Wolfclaw5", "Lynxclaw6", "Grizzlyclaw6", "Leopardclaw6",
    "Cougarclaw6", "Cheetahclaw5", "Dragonclaw6", "Ravenclaw7", "Tigerclaw7",
    "Lionclaw6", "Foxclaw6", "Bearclaw7", "Falconclaw6", "Eagleclaw6", "Pantherclaw7",
    "Jaguarclaw7",
)

_INT32_MASK = 0xFFFFFFFF


def _to_int32(value: int) -> int:
    value &= _INT32_MASK
    return value - (1 << 32) if value & 0x80000000 else value


def _string_hash(seed: str) -> int:
    # h = h * 31 + code point, wrapped to signed 32 bit after every step
    h = 0
    for char in seed:
        h = _to_int32((h << 5) - h + ord(char))
    return h


def generate_pseudonym(seed: str | None = None) -> str:
    """Return ``<Adjective><Noun><100-999>``.

    The same seed always yields the same handle; without a seed the handle is
    random.
    """
    h = _string_hash(seed) if seed else secrets.randbelow(1_000_000)
    adjective = ADJECTIVES[abs(h) % len(ADJECTIVES)]
    noun = NOUNS[abs(h >> 3) % len(NOUNS)]
    number = abs(h >> 6) % 900 + 100
    return f"{adjective}{noun}{number}"
