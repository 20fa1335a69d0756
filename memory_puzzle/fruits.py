"""The pool of fruits that can appear on the board, and their colours."""

RESET = "\033[0m"

FRUIT_NAMES: list[str] = [
    "Apple", "Banana", "Cherry", "Grape", "Watermelon",
    "Pineapple", "Kiwi", "Peach", "Strawberry", "Melon",
    "Mango", "Pear", "Orange", "Lemon", "GreenApple",
    "Tomato", "Eggplant", "Coconut", "Avocado",
]

FRUIT_COLORS: dict[str, str] = {
    "Apple": "\033[31m",
    "Banana": "\033[33m",
    "Cherry": "\033[31m",
    "Grape": "\033[35m",
    "Watermelon": "\033[32m",
    "Pineapple": "\033[33m",
    "Kiwi": "\033[32m",
    "Peach": "\033[35m",
    "Strawberry": "\033[31m",
    "Melon": "\033[32m",
    "Mango": "\033[33m",
    "Pear": "\033[32m",
    "Orange": "\033[33m",
    "Lemon": "\033[33m",
    "GreenApple": "\033[32m",
    "Tomato": "\033[31m",
    "Eggplant": "\033[35m",
    "Coconut": "\033[37m",
    "Avocado": "\033[32m",
}


def colorize(name):
    """Return the fruit name wrapped in its ANSI colour and a reset code."""
    return f"{FRUIT_COLORS.get(name, '')}{name}{RESET}"


def max_name_length(names):
    """Return the length of the longest name, or 0 for no names."""
    return max((len(name) for name in names), default=0)