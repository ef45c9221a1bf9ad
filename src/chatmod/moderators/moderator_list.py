from typing import List


def parse_moderator_list(text: str) -> List[str]:
    """Parse the moderator list out of a server response.

    The comma-separated names start after the first colon, as in
    ``"The moderators of this room are: alice, bob"``. Each name is trimmed.
    A response without a colon (or starting with one), with nothing after
    the colon, or with only whitespace after it yields an empty list.

    Args:
        text: Response text as received from the chat service.

    Returns:
        Moderator names in the order the server listed them.
    """
    start = text.find(":") + 1
    if start <= 1 or start >= len(text):
        return []

    remainder = text[start:]
    if not remainder.strip():
        return []
    return [name.strip() for name in remainder.split(",")]
