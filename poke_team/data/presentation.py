"""Colour tables for type badges and move damage classes."""

TYPE_COLORS = {
    "normal": "#A8A878",
    "fire": "#F08030",
    "water": "#6890F0",
    "electric": "#F8D030",
    "grass": "#78C850",
    "ice": "#98D8D8",
    "fighting": "#C03028",
    "poison": "#A040A0",
    "ground": "#E0C068",
    "flying": "#A890F0",
    "psychic": "#F85888",
    "bug": "#A8B820",
    "rock": "#B8A038",
    "ghost": "#705898",
    "dragon": "#7038F8",
    "dark": "#705848",
    "steel": "#B8B8D0",
    "fairy": "#EE99AC",
}

DAMAGE_CLASS_COLORS = {
    "physical": "#C92A2A",
    "special": "#5F3DC4",
    "status": "#495057",
}
DEFAULT_DAMAGE_CLASS_COLOR = "#495057"


def type_color(type_name: str) -> str:
    return TYPE_COLORS.get(type_name.lower(), TYPE_COLORS["normal"])


def damage_class_color(damage_class: str) -> str:
    return DAMAGE_CLASS_COLORS.get(damage_class, DEFAULT_DAMAGE_CLASS_COLOR)
