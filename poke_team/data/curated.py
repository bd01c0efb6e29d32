"""Hand-picked Pokemon id tables used by the role classifier and recommender.

These are compiled-in constants. To refresh them, edit the tables below; ids
are National Dex numbers as served by PokeAPI.
"""

from __future__ import annotations

from typing import Dict, List, Tuple

# Strong or popular picks per type, searched in order when materializing candidates.
POPULAR_POKEMON_BY_TYPE: Dict[str, List[int]] = {
    # Charizard, Arcanine, Rapidash, Flareon, Typhlosion, Entei, Blaziken, Infernape, Chandelure, Cinderace
    "fire": [6, 59, 78, 136, 157, 244, 257, 392, 609, 815],
    # Blastoise, Gyarados, Articuno, Feraligatr, Suicune, Swampert, Empoleon, Samurott, Greninja, Inteleon
    "water": [9, 130, 144, 160, 245, 260, 395, 503, 658, 818],
    # Venusaur, Vileplume, Exeggutor, Meganium, Sceptile, Torterra, Tangrowth, Serperior, Decidueye, Rillaboom
    "grass": [3, 45, 103, 154, 254, 389, 465, 497, 724, 812],
    # Pikachu, Raichu, Electabuzz, Jolteon, Ampharos, Raikou, Manectric, Electivire, Eelektross, Zeraora
    "electric": [25, 26, 125, 135, 181, 243, 310, 466, 604, 807],
    # Alakazam, Mr. Mime, Mewtwo, Espeon, Celebi, Gardevoir, Gallade, Reuniclus, Tapu Lele, Mr. Rime
    "psychic": [65, 122, 150, 196, 251, 282, 475, 579, 786, 866],
    # Dewgong, Lapras, Articuno, Delibird, Glalie, Glaceon, Mamoswine, Kyurem, Avalugg, Arctovish
    "ice": [87, 131, 144, 225, 361, 471, 473, 646, 713, 883],
    # Dragonite, Kingdra, Salamence, Garchomp, Kyurem, Sylveon, Goodra, Naganadel, Dragapult, Eternatus
    "dragon": [149, 230, 373, 445, 646, 700, 706, 804, 887, 890],
    # Gengar, Umbreon, Houndoom, Tyranitar, Absol, Honchkrow, Drapion, Hydreigon, Yveltal, Obstagoon
    "dark": [94, 197, 229, 248, 359, 430, 452, 635, 717, 862],
    # Machamp, Hitmonchan, Heracross, Blaziken, Infernape, Lucario, Timburr, Keldeo, Crabominable, Sirfetch'd
    "fighting": [68, 107, 214, 257, 392, 448, 532, 647, 739, 865],
    # Nidoking, Muk, Crobat, Toxicroak, Garbodor, Toxapex, Nihilego, Naganadel
    "poison": [34, 89, 169, 454, 569, 748, 793, 804],
    # Nidoqueen, Golem, Marowak, Steelix, Donphan, Flygon, Garchomp, Rhyperior, Excadrill, Palossand
    "ground": [31, 76, 105, 208, 232, 330, 445, 464, 530, 770],
    # Charizard, Pidgeot, Farfetch'd, Aerodactyl, Articuno, Dragonite, Skarmory, Swellow, Altaria, Honchkrow
    "flying": [6, 18, 83, 142, 144, 149, 227, 277, 334, 430],
    # Butterfree, Beedrill, Scyther, Pinsir, Scizor, Heracross, Yanmega, Leavanny, Volcarona, Vikavolt
    "bug": [12, 15, 123, 127, 212, 214, 469, 542, 637, 738],
    # Golem, Omastar, Aerodactyl, Magcargo, Tyranitar, Aggron, Rampardos, Gigalith, Terrakion, Diancie
    "rock": [76, 139, 142, 219, 248, 306, 409, 526, 639, 719],
    # Gengar, Marowak, Banette, Dusknoir, Chandelure, Aegislash, Gourgeist, Lunala, Polteageist
    "ghost": [94, 105, 354, 477, 609, 681, 711, 792, 855],
    # Magnemite, Steelix, Skarmory, Aggron, Metagross, Empoleon, Lucario, Excadrill, Aegislash, Celesteela
    "steel": [81, 208, 227, 306, 376, 395, 448, 530, 681, 797],
    # Clefairy, Jigglypuff, Mr. Mime, Azumarill, Gardevoir, Togekiss, Sylveon, Xerneas, Tapu Lele, Hatterene
    "fairy": [35, 39, 122, 184, 282, 468, 700, 716, 786, 858],
}

# Used when a team has no critical weaknesses or coverage gaps to patch.
POPULAR_FALLBACK_TYPES = ["dragon", "steel", "fairy", "fighting", "psychic"]

# Bulbasaur, Charmander, Squirtle, Chikorita, Cyndaquil, Totodile
STARTER_IDS = [1, 4, 7, 152, 155, 158]

HAZARD_SETTER_IDS = frozenset(
    {
        76, 208, 227, 464,  # Stealth Rock
        89, 205, 442, 563,  # Spikes
        169, 454, 569, 748,  # Toxic Spikes
    }
)
HAZARD_SETTER_TYPES = frozenset({"rock", "ground", "steel"})

HAZARD_REMOVER_IDS = frozenset(
    {
        18, 83, 142, 227, 277, 334, 430,  # Defog
        76, 465, 464, 530,  # Rapid Spin
    }
)
HAZARD_REMOVER_TYPES = frozenset({"flying", "psychic"})

SUPPORT_IDS = frozenset(
    {
        113, 242, 196, 197, 282, 468, 700,
        122, 124, 144, 145, 146,
    }
)
SUPPORT_TYPES = frozenset({"psychic", "fairy", "grass"})

# Cores a single Pokemon can take part in (any shared type counts).
CORE_COMBINATIONS: Dict[str, Tuple[str, ...]] = {
    "fire-water-grass": ("fire", "water", "grass"),
    "dragon-steel-fairy": ("dragon", "steel", "fairy"),
    "electric-ground-flying": ("electric", "ground", "flying"),
    "fighting-psychic-dark": ("fighting", "psychic", "dark"),
    "rock-steel-water": ("rock", "steel", "water"),
}

# Cores that count toward team core strength when every type is present.
TEAM_CORES: Dict[str, Tuple[str, ...]] = {
    "FWG": ("fire", "water", "grass"),
    "DSF": ("dragon", "steel", "fairy"),
    "FPD": ("fighting", "psychic", "dark"),
}

STRONG_SYNERGY_TYPES = frozenset({"dragon", "steel", "fairy", "psychic", "fighting"})
STRONG_OFFENSIVE_TYPES = frozenset({"dragon", "fighting", "ground", "rock", "steel"})

COMPLEMENTARY_TYPE_PAIRS: List[Tuple[str, str]] = [
    ("fire", "water"),
    ("fire", "ground"),
    ("water", "electric"),
    ("grass", "fire"),
    ("grass", "flying"),
    ("electric", "ground"),
    ("psychic", "dark"),
    ("fighting", "psychic"),
    ("ghost", "normal"),
    ("steel", "fire"),
    ("dragon", "ice"),
    ("fairy", "steel"),
]

# Inclusive National Dex ranges covering each generation's legendaries.
LEGENDARY_ID_RANGES: List[Tuple[int, int]] = [
    (144, 151),
    (243, 251),
    (377, 386),
    (480, 493),
]
PSEUDO_LEGENDARY_IDS = frozenset({149, 248, 373, 376, 445, 484, 612, 635, 700, 706})
COMPETITIVE_STAPLE_IDS = frozenset(
    {6, 9, 65, 68, 94, 130, 142, 196, 197, 212, 214, 229, 254, 257, 260}
)
