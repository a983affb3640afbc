from hnitems.schemas import Comment, Item, Job, Poll, PollOpt, Story

EXCERPT_LENGTH = 60


def excerpt(text: str, limit: int = EXCERPT_LENGTH) -> str:
    if len(text) <= limit:
        return text
    return text[:limit] + "..."


def summarize(item: Item) -> str:
    """Render a decoded item as a single line of text."""
    if isinstance(item, Story):
        return f'"{item.title}" submitted by {item.by}'
    if isinstance(item, Job):
        return f"job posting: {item.title}"
    if isinstance(item, Poll):
        return f'poll: "{item.title}" - choose one of {len(item.parts)} options'
    if isinstance(item, PollOpt):
        return f"poll option: {item.text}"
    if isinstance(item, Comment):
        return f"{item.by} commented: {excerpt(item.text)}"
    raise TypeError(f"not a decoded Hacker News item: {item!r}")
