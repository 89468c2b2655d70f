"""The cow that sits under the balloon."""

COW = r"""         \  ^__^
          \ (oo)\_______
            (__)\       )\/\
                ||----w |
                ||     ||"""


def compose(balloon: str) -> str:
    """Place the cow below the balloon, separated by a blank line."""
    return f"{balloon}\n\n{COW}\n"
