"""Fixed messages shown by the text front end."""


def greeting() -> str:
    return "Hello! I'm arc\nWhat can I do for you?"


def farewell() -> str:
    return "Bye. Hope to see you again soon!"
