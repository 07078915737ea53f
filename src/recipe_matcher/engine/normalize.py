"""Ingredient name normalization and the fuzzy match predicate."""


def normalize(raw: str) -> str:
    """Lowercase and trim an ingredient name.

    ``str.lower`` also folds non-ASCII letters ("JALAPEÑO" -> "jalapeño");
    no accent stripping or locale-specific folding is applied.
    """
    return raw.strip().lower()


def query_term(raw: str) -> str:
    """Search term sent to the data source for a selected ingredient.

    Multi-word ingredients are queried by their first word only
    ("chicken breast" -> "chicken"). Returns "" for blank input.
    """
    words = normalize(raw).split()
    return words[0] if words else ""


def ingredients_match(recipe_ingredient: str, selected: str) -> bool:
    """Bidirectional substring containment on normalized names.

    Permissive on purpose: tolerates plurals and qualifiers ("tomato" vs
    "tomatoes", "rice" vs "white rice") and accepts false positives such
    as "egg" vs "eggplant".
    """
    recipe_name = normalize(recipe_ingredient)
    selected_name = normalize(selected)
    return selected_name in recipe_name or recipe_name in selected_name
