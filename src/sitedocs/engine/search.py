"""Line-oriented search over index documents."""

from sitedocs.core.models import MatchContext, SearchResult


def search_lines(text: str, query: str, case_insensitive: bool = True) -> SearchResult:
    """Find every line containing a query, with one line of context each side.

    Lines are split on ``\\n`` only. An empty query matches every line.

    Args:
        text: Document to search.
        query: Substring to look for.
        case_insensitive: Compare lower-cased text when True.

    Returns:
        SearchResult with one MatchContext per matching line, in line order.
    """
    lines = text.split("\n")
    needle = query.lower() if case_insensitive else query
    last = len(lines) - 1

    matches: list[MatchContext] = []
    for index, line in enumerate(lines):
        haystack = line.lower() if case_insensitive else line
        if needle not in haystack:
            continue

        matches.append(
            MatchContext(
                line_number=index,
                line=line,
                before=lines[index - 1] if index > 0 else None,
                after=lines[index + 1] if index < last else None,
            )
        )

    return SearchResult(query=query, case_insensitive=case_insensitive, matches=matches)
