def upperCase(word: str, acronyms: dict[str, str]) -> str:
    if word in acronyms:
        return acronyms[word]
    return word[:1].upper() + word[1:]


def iconVariableName(iconSet: str, baseName: str, acronyms: dict[str, str]) -> str:
    """Build the exported identifier for an icon, for example
    ("action", "3d_rotation") -> "Action3DRotation".
    """
    parts = [iconSet] + baseName.split("_")
    return "".join(upperCase(part, acronyms) for part in parts if part)
