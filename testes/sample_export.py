"""Small Blogger exports shared by the tests."""

FEED_HEADER = (
    "<?xml version='1.0' encoding='UTF-8'?>"
    "<feed xmlns='http://www.w3.org/2005/Atom'"
    " xmlns:app='http://purl.org/atom/app#'"
    " xmlns:thr='http://purl.org/syndication/thread/1.0'>"
)
FEED_FOOTER = "</feed>"

KIND_POST = "http://schemas.google.com/blogger/2008/kind#post"
KIND_COMMENT = "http://schemas.google.com/blogger/2008/kind#comment"
KIND_PAGE = "http://schemas.google.com/blogger/2008/kind#page"


def entry(
    entry_id,
    title="A title",
    published="2020-01-02T03:04:05.000-08:00",
    content="<p>Hello</p>",
    categories=(KIND_POST,),
    draft=False,
    reply_to=None,
):
    parts = [f"<entry><id>{entry_id}</id><published>{published}</published>"]
    for term in categories:
        parts.append(f"<category scheme='http://www.blogger.com/atom/ns#' term='{term}'/>")
    if title is not None:
        parts.append(f"<title type='text'>{title}</title>")
    if content is not None:
        parts.append(f"<content type='html'>{content}</content>")
    if draft:
        parts.append("<app:control><app:draft>yes</app:draft></app:control>")
    if reply_to:
        parts.append(f"<thr:in-reply-to ref='{reply_to}' type='text/html'/>")
    parts.append("</entry>")
    return "".join(parts)


def feed(*entries):
    return (FEED_HEADER + "".join(entries) + FEED_FOOTER).encode("utf-8")


def three_entry_export():
    """One post, one comment on it and one static page."""
    return feed(
        entry("tag:blogger.com,1999:blog-1.post-123", title="First Post"),
        entry(
            "tag:blogger.com,1999:blog-1.post-456",
            title="Nice post!",
            categories=(KIND_COMMENT,),
            reply_to="tag:blogger.com,1999:blog-1.post-123",
        ),
        entry("tag:blogger.com,1999:blog-1.page-789", title="About", categories=(KIND_PAGE,)),
    )
