from collections.abc import Sequence


def format_review_digest(title: str, reviews: Sequence[str]) -> str:
    """
    Build the notification text summarizing a book's reviews.

    The title goes on the header line and each review follows as a numbered
    entry, in the order the review source returned them. Continuation lines
    of a multi-line review are indented under their entry.
    """
    lines = [f"Reviews for '{title}':"]
    for number, review in enumerate(reviews, start=1):
        prefix = f"{number}. "
        indent = "\n" + " " * len(prefix)
        lines.append(prefix + indent.join(str(review).splitlines() or [""]))
    return "\n".join(lines)
