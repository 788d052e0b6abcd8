"""
Image references: where an image comes from.

A caller hands over either a string or an already parsed URL. The string is
classified exactly once, at the call boundary, into a RemoteReference or a
LocalReference so the rest of the code never has to inspect types again.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Union
from urllib.parse import ParseResult, SplitResult, quote, urlsplit, urlunsplit

# Ports dropped from the host when they are the scheme's default
DEFAULT_PORTS = {
    "http": 80,
    "https": 443,
    "ws": 80,
    "wss": 443,
    "ftp": 21,
}

# Schemes whose empty path is normalised to "/" and whose dot segments are removed
HIERARCHICAL_SCHEMES = {"http", "https", "ws", "wss", "ftp", "file"}

# Characters left unescaped, per component, when percent-encoding a URL the
# way browsers do. "%" is kept so existing escapes are not encoded twice.
PATH_SAFE = "!$%&'()*+,-./:;=@[\\]^_|~"
QUERY_SAFE = "!$%&()*+,-./:;=?@[\\]^_`{|}~"
FRAGMENT_SAFE = "!#$%&'()*+,-./:;=?@[\\]^_{|}~"

SINGLE_DOT_SEGMENTS = {".", "%2e"}
DOUBLE_DOT_SEGMENTS = {"..", ".%2e", "%2e.", "%2e%2e"}


def _remove_dot_segments(path: str) -> str:
    """Resolve "." and ".." segments of an absolute path."""
    segments = path.split("/")[1:]
    output: list[str] = []
    for i, segment in enumerate(segments):
        is_last = i == len(segments) - 1
        lowered = segment.lower()
        if lowered in DOUBLE_DOT_SEGMENTS:
            if output:
                output.pop()
            if is_last:
                output.append("")
        elif lowered in SINGLE_DOT_SEGMENTS:
            if is_last:
                output.append("")
        else:
            output.append(segment)
    return "/" + "/".join(output)


def _encode_hostname(hostname: str) -> str:
    if hostname.isascii():
        return hostname
    try:
        return hostname.encode("idna").decode("ascii")
    except UnicodeError as e:
        raise ValueError(f"Invalid hostname: {hostname!r}") from e


def _normalize_url(url: SplitResult) -> SplitResult:
    """Bring a split URL to the form browsers report as ``href``.

    Lowercases scheme and host, IDNA-encodes unicode hosts, drops a default
    port, removes dot segments, and percent-encodes path, query and fragment.
    """
    scheme = url.scheme.lower()
    hierarchical = scheme in HIERARCHICAL_SCHEMES
    hostname = _encode_hostname((url.hostname or "").lower())
    if ":" in hostname:
        # IPv6 literal
        hostname = f"[{hostname}]"

    port = url.port
    if port is not None and DEFAULT_PORTS.get(scheme) == port:
        port = None
    host = hostname if port is None else f"{hostname}:{port}"

    userinfo = ""
    if url.username is not None:
        userinfo = url.username
        if url.password is not None:
            userinfo = f"{userinfo}:{url.password}"
        userinfo = f"{userinfo}@"

    path = url.path
    if hierarchical:
        path = path.replace("\\", "/")
        if not path:
            path = "/"
        path = _remove_dot_segments(path)

    return SplitResult(
        scheme,
        f"{userinfo}{host}",
        quote(path, safe=PATH_SAFE),
        quote(url.query, safe=QUERY_SAFE),
        quote(url.fragment, safe=FRAGMENT_SAFE),
    )


def _is_absolute_url(url: SplitResult) -> bool:
    return bool(url.scheme) and bool(url.netloc) and bool(url.hostname)


@dataclass(frozen=True)
class RemoteReference:
    """An image addressed by an absolute URL.

    Attributes:
        url: Normalised, split URL (scheme, netloc, path, query, fragment).
    """

    url: SplitResult

    @classmethod
    def from_url(cls, url: str | SplitResult | ParseResult) -> RemoteReference:
        if isinstance(url, ParseResult):
            url = urlsplit(url.geturl())
        elif isinstance(url, str):
            url = urlsplit(url.strip())
        if not _is_absolute_url(url):
            raise ValueError(f"Not an absolute URL: {urlunsplit(url)!r}")
        return cls(url=_normalize_url(url))

    @property
    def href(self) -> str:
        """Full URL string."""
        return urlunsplit(self.url)

    @property
    def host(self) -> str:
        """Hostname plus port when the port is not the scheme default."""
        netloc = self.url.netloc
        return netloc.rpartition("@")[2]

    @property
    def pathname(self) -> str:
        return self.url.path

    def __str__(self) -> str:
        return self.href


@dataclass(frozen=True)
class LocalReference:
    """An image stored on the local filesystem.

    Attributes:
        path: Absolute path to the file.
    """

    path: Path

    @classmethod
    def from_path(cls, path: str | Path) -> LocalReference:
        return cls(path=Path(path).expanduser().resolve())

    def __str__(self) -> str:
        return str(self.path)


ImageReference = Union[RemoteReference, LocalReference]

ImageSource = Union[str, Path, SplitResult, ParseResult, RemoteReference, LocalReference]


def parse_image_reference(source: ImageSource) -> ImageReference:
    """Classify a path-or-URL into a remote or local reference.

    Args:
        source: A URL string, a filesystem path, a parsed URL object, or an
            already built reference.

    Returns:
        RemoteReference when the source is a parsed URL or a string that
        parses as an absolute URL (scheme and host). LocalReference otherwise,
        resolved to an absolute path.

    A string that parses as a URL is remote even when a local file with the
    same name exists.
    """
    if isinstance(source, (RemoteReference, LocalReference)):
        return source

    if isinstance(source, (SplitResult, ParseResult)):
        return RemoteReference.from_url(source)

    if isinstance(source, Path):
        return LocalReference.from_path(source)

    try:
        parsed = urlsplit(source.strip())
        if _is_absolute_url(parsed):
            return RemoteReference.from_url(parsed)
    except ValueError:
        # Malformed URL (bad port, bad IPv6 literal): not a URL then
        pass

    return LocalReference.from_path(source)
