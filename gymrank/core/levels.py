"""Competency level taxonomy and ordering.

Levels run "Level 1" through "Level 10", then "Elite". Numbered levels
compare by their integer suffix, so "Level 10" sorts after "Level 2".
Labels outside the taxonomy never raise here: they sort after Elite,
alphabetically among themselves.
"""

LEVEL_PREFIX = 'Level '
ELITE = 'Elite'

LEVELS = tuple(f'{LEVEL_PREFIX}{n}' for n in range(1, 11)) + (ELITE,)


def level_number(label: str) -> int | None:
    """Return the integer suffix of a "Level N" label, or None."""
    if not label.startswith(LEVEL_PREFIX):
        return None
    suffix = label[len(LEVEL_PREFIX):]
    if not suffix.isdecimal():
        return None
    return int(suffix)


def level_sort_key(label: str) -> tuple:
    """Sort key giving the total level order.

    Groups: numbered levels (by number, then label text), then Elite,
    then anything else.
    """
    number = level_number(label)
    if number is not None:
        return (0, number, label)
    if label == ELITE:
        return (1, 0, '')
    return (2, 0, label)


def is_valid_level(label: str) -> bool:
    return label in LEVELS


def sort_levels(labels) -> list[str]:
    """Distinct labels in level order."""
    return sorted(set(labels), key=level_sort_key)
