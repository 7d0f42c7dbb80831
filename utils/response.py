class Response(object):
    """
    Result of a single fetch.

    Attributes:
        url: final URL after redirects (base for relative links)
        status: HTTP status code
        body: raw response bytes
        headers: response headers (may be empty)
    """

    def __init__(self, url, status, body=b"", headers=None):
        self.url = url
        self.status = status
        self.body = body
        self.headers = headers if headers is not None else {}

    @property
    def ok(self):
        return 200 <= self.status < 300

    def __repr__(self):
        return f"<Response [{self.status}] {self.url}>"
