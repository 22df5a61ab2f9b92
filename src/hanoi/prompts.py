"""
╔══════════════════════════════════════════════════════════════════════════════╗
║                           CONSOLE PROMPTS                                     ║
║                                                                               ║
║  Every text the console shows to the player, keyed by what it is for.        ║
╚══════════════════════════════════════════════════════════════════════════════╝
"""


# ══════════════════════════════════════════════════════════════════════════════
#  DEFINE PROMPTS
# ══════════════════════════════════════════════════════════════════════════════

PROMPTS = {
    "header": "Tower of Hanoi",

    "menu": (
        "How would you like to solve the problem?\n"
        "By Yourself          - Type: 1 or B or b\n"
        "Iteratively          - Type: 2 or I or i\n"
        "Recursively          - Type: 3 or R or r\n"
        "Mutually Recursively - Type: 4 or M or m\n"
        "Change Disk Count    - Type: 5 or C or c\n"
        "Quit                 - Type any other key\n"
        "Enter the keyword: "
    ),

    "peg": "{prefix} [ left | middle | right ]: ",
    "peg_invalid": "invalid input! please try again",

    "disk_count": "Enter new disk count (at least one): ",
    "disk_count_invalid": "Invalid number, please try again: ",

    "won": "congratulations! you have won in {moves} moves",
    "solved": "{strategy}: {moves} moves",
}

# Menu keys (digit or letter) mapped to the action they start
MENU_CHOICES = {
    "1": "manual", "B": "manual",
    "2": "iterative", "I": "iterative",
    "3": "recursive", "R": "recursive",
    "4": "mutual", "M": "mutual",
    "5": "disk_count", "C": "disk_count",
}


def get_prompt(kind: str, **values) -> str:
    """
    Look up a prompt and fill in its placeholders.

    Args:
        kind: Key in PROMPTS
        **values: Values for the placeholders of that prompt

    Returns:
        Formatted prompt string
    """
    return PROMPTS[kind].format(**values)


def menu_choice(keyword: str) -> str:
    """Map a menu keyword to its action; anything unknown means quit."""
    return MENU_CHOICES.get(keyword.strip()[:1].upper(), "quit")
