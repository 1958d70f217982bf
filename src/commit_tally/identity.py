"""Author-name normalization."""


def normalize_author(name: str) -> str:
    """Turn a raw commit author name into the key commits are counted under.

    Email-like names (anything containing ``@``) are used verbatim.
    Everything else is lowercased and reduced to ``"first last"`` using the
    first and last whitespace-separated tokens.  A first token carrying a
    comma means the name was written ``"Last, First [middle...]"``, so the
    text before the comma becomes the last name and the given name is taken
    from after the comma (``"smith,john"``) or, when the comma ends the
    token, from the next token (``"smith, john"``).

    Single-token names keep an empty last name, which leaves a trailing
    space (``"Madonna"`` -> ``"madonna "``).
    """
    if "@" in name:
        return name

    tokens = name.lower().split()
    first = tokens[0] if tokens else ""
    last = tokens[-1] if len(tokens) > 1 else ""

    if "," in first:
        surname, _, given = first.partition(",")
        if not given and len(tokens) > 1:
            given = tokens[1]
        first, last = given, surname

    return f"{first} {last}"
