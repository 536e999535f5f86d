"""JSONPlaceholder client, formatting and post statistics."""

from collections import Counter
from collections.abc import Iterator

import httpx

from playground.config import get_settings
from playground.errors import UpstreamError
from playground.logging_config import logger
from playground.models.placeholder import Post, PostSummary, User

RULE = "=" * 60
THIN_RULE = "-" * 60


def _endpoint(resource: str) -> str:
    return f"{get_settings().placeholder_api_url.rstrip('/')}/{resource}"


def _request(
    *,
    url: str,
    event_prefix: str,
    log_context: dict,
    error_message: str,
) -> httpx.Response:
    """Execute an HTTP GET with consistent logging.

    Args:
        url: The URL to call.
        event_prefix: Log event prefix for consistent names.
        log_context: Extra log fields for all events.
        error_message: Error message to wrap in UpstreamError.

    Returns:
        The successful HTTP response.

    Raises:
        UpstreamError: When the request fails or returns a non-2xx status.
    """
    try:
        response = httpx.get(url, timeout=get_settings().http_timeout_s)
        logger.info(f"{event_prefix}_RESPONSE", **log_context, status=response.status_code)
        response.raise_for_status()
        return response
    except httpx.HTTPStatusError as exc:
        logger.error(
            f"{event_prefix}_BAD_STATUS",
            **log_context,
            status=exc.response.status_code,
            reason=exc.response.reason_phrase,
        )
        raise UpstreamError(error_message, status_code=exc.response.status_code) from exc
    except httpx.RequestError as exc:
        logger.error(
            f"{event_prefix}_REQUEST_FAILED",
            **log_context,
            error=str(exc) or "No response received from server",
        )
        raise UpstreamError(error_message) from exc


def fetch_posts(limit: int = 10) -> list[Post]:
    """Fetch the first ``limit`` posts.

    Raises:
        UpstreamError: If the request fails or the payload is not a post list.
    """
    url = _endpoint("posts")
    response = _request(
        url=url,
        event_prefix="POSTS",
        log_context={"url": url, "limit": limit},
        error_message="Posts lookup failed",
    )
    try:
        posts = [Post(**item) for item in response.json()[:limit]]
    except (TypeError, ValueError, KeyError) as exc:
        logger.error("POSTS_BAD_PAYLOAD", error=str(exc))
        raise UpstreamError("Posts lookup failed") from exc
    logger.info("POSTS_FETCHED", count=len(posts))
    return posts


def fetch_users() -> list[User]:
    """Fetch every user.

    Raises:
        UpstreamError: If the request fails or the payload is not a user list.
    """
    url = _endpoint("users")
    response = _request(
        url=url,
        event_prefix="USERS",
        log_context={"url": url},
        error_message="Users lookup failed",
    )
    try:
        return [User(**item) for item in response.json()]
    except (TypeError, ValueError, KeyError) as exc:
        logger.error("USERS_BAD_PAYLOAD", error=str(exc))
        raise UpstreamError("Users lookup failed") from exc


def probe_missing_endpoint() -> bool:
    """Request an endpoint that does not exist and expect a 404.

    Returns:
        True when the 404 arrived and was discarded, False for any other outcome.
    """
    url = _endpoint("invalid-endpoint")
    try:
        _request(
            url=url,
            event_prefix="PROBE",
            log_context={"url": url},
            error_message="Probe failed",
        )
    except UpstreamError as exc:
        if exc.status_code == 404:
            logger.info("PROBE_EXPECTED_404", url=url)
            return True
        logger.warning("PROBE_UNEXPECTED_ERROR", url=url, error=str(exc))
        return False
    logger.warning("PROBE_UNEXPECTED_SUCCESS", url=url)
    return False


def format_title(title: str) -> str:
    """Capitalise the first letter of each space-separated word."""
    return " ".join(word[:1].upper() + word[1:] for word in title.split(" "))


def summarize_posts(posts: list[Post]) -> PostSummary:
    """Compute counts and averages over ``posts``.

    Top users are the three with the most posts; ties keep first-seen order.
    """
    total = len(posts)
    counts = Counter(post.userId for post in posts)
    return PostSummary(
        total_posts=total,
        unique_users=len(counts),
        average_title_length=sum(len(p.title) for p in posts) / total if total else 0.0,
        average_body_length=sum(len(p.body) for p in posts) / total if total else 0.0,
        top_users=counts.most_common(3),
    )


def post_lines(posts: list[Post]) -> list[str]:
    lines = ["Post Titles:", "=" * 80]
    for index, post in enumerate(posts, start=1):
        lines.append(f"{index:>2}. {format_title(post.title)}")
        lines.append(f"    User ID: {post.userId} | Post ID: {post.id}")
        lines.append(f"    Body length: {len(post.body)} characters")
        lines.append(THIN_RULE)
    return lines


def summary_lines(summary: PostSummary) -> list[str]:
    lines = [
        "Summary Statistics:",
        "=" * 40,
        f"Total Posts: {summary.total_posts}",
        f"Unique Users: {summary.unique_users}",
        f"Average Title Length: {summary.average_title_length:.1f} characters",
        f"Average Body Length: {summary.average_body_length:.1f} characters",
        "",
        "Top Active Users:",
        "-" * 25,
    ]
    for rank, (user_id, count) in enumerate(summary.top_users, start=1):
        lines.append(f"{rank}. User {user_id}: {count} posts")
    return lines


def user_lines(users: list[User], limit: int = 5) -> list[str]:
    lines = ["Users Overview:", "=" * 50]
    for index, user in enumerate(users[:limit], start=1):
        lines += [
            f"{index}. {user.name} (@{user.username})",
            f"   {user.email}",
            f"   {user.website}",
            f"   {user.company.name}",
            "-" * 40,
        ]
    return lines


def run_demo(limit: int = 8) -> Iterator[str]:
    """Yield the full demo output: posts, statistics, users and the 404 probe.

    Raises:
        UpstreamError: If posts or users cannot be fetched.
    """
    yield "JSONPlaceholder HTTP Requests Demonstration"
    yield RULE
    posts = fetch_posts(limit)
    yield from post_lines(posts)
    yield ""
    yield from summary_lines(summarize_posts(posts))
    yield ""
    yield from user_lines(fetch_users())
    yield ""
    yield "Demonstrating Error Handling:"
    if probe_missing_endpoint():
        yield "Caught the expected 404 from an invalid endpoint"
    else:
        yield "Unexpected outcome from the invalid endpoint"
    yield RULE
