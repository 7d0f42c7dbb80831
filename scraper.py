import re
from urllib.parse import urlparse, urljoin, urldefrag

from bs4 import BeautifulSoup


SKIPPED_HREF_PREFIXES = ("javascript:", "mailto:", "tel:", "#")

# Files that never contain links worth following.
BINARY_EXTENSIONS = re.compile(
    r".*\.(css|js|bmp|gif|jpe?g|ico"
    + r"|png|tiff?|mid|mp2|mp3|mp4"
    + r"|wav|avi|mov|mpeg|ram|m4v|mkv|ogg|ogv|pdf"
    + r"|ps|eps|tex|ppt|pptx|doc|docx|xls|xlsx"
    + r"|exe|bz2|tar|msi|bin|7z|psd|dmg|iso"
    + r"|epub|dll|tgz|sha1|jar|csv"
    + r"|rm|smil|wmv|swf|wma|zip|rar|gz|apk|woff2?)$"
)


def extract_links(body, base_url=None):
    """
    Return the href of every <a> tag in ``body``, in document order.

    Relative links are resolved against ``base_url`` when given and
    fragments are dropped. Malformed markup yields whatever could be
    parsed; this function never raises.
    """
    if not body:
        return list()

    links = []
    try:
        soup = BeautifulSoup(body, "lxml")
        for tag in soup.find_all("a", href=True):
            href = tag["href"].strip()
            if not href or href.lower().startswith(SKIPPED_HREF_PREFIXES):
                continue
            absolute = urljoin(base_url, href) if base_url else href
            absolute, _ = urldefrag(absolute)
            links.append(absolute)
    except Exception:
        # best effort: keep the links found before the parser gave up
        return links

    return links


def is_valid(url, allowed_domains=()):
    """
    Minimal validation before a URL is claimed.

    Args:
        url: absolute URL
        allowed_domains: host suffixes such as ".example.com"; empty allows
            any host. A suffix also matches the bare domain ("example.com").
    """
    try:
        parsed = urlparse(url)
    except ValueError:
        return False
    if parsed.scheme not in {"http", "https"}:
        return False

    try:
        hostname = parsed.hostname
    except ValueError:
        return False
    if not hostname:
        return False

    if allowed_domains and not any(
        hostname == domain.lstrip(".")
        or hostname.endswith(domain if domain.startswith(".") else "." + domain)
        for domain in allowed_domains
    ):
        return False

    if BINARY_EXTENSIONS.match(parsed.path.lower()):
        return False

    return True
