"""Transformation of notification text according to a markup mode."""

from __future__ import annotations

import enum
import logging
import string

__all__ = [
    "MarkupMode",
    "markup_strip",
    "markup_strip_a",
    "markup_strip_img",
    "markup_transform",
]

_log = logging.getLogger(__name__)

_SUPPORTED_ENTITIES = ("&amp;", "&lt;", "&gt;", "&quot;", "&apos;")
_ALT = 'alt="'
_SRC = 'src="'


class MarkupMode(enum.Enum):
    """How markup in a notification's text is treated."""

    NULL = 0
    NO = 1
    STRIP = 2
    FULL = 3


def _quote(text: str) -> str:
    for old, new in (("&", "&amp;"), ('"', "&quot;"), ("'", "&apos;"),
                     ("<", "&lt;"), (">", "&gt;")):
        text = text.replace(old, new)
    return text


def _unquote(text: str) -> str:
    for old, new in (("&quot;", '"'), ("&apos;", "'"), ("&lt;", "<"),
                     ("&gt;", ">"), ("&amp;", "&")):
        text = text.replace(old, new)
    return text


def _br2nl(text: str) -> str:
    for tag in ("<br>", "<br/>", "<br />"):
        text = text.replace(tag, "\n")
    return text


def _strip_delimited(text: str, opening: str, closing: str) -> str:
    out = []
    depth = 0
    for char in text:
        if char == opening:
            depth += 1
        elif char == closing and depth > 0:
            depth -= 1
        elif depth == 0:
            out.append(char)
    return "".join(out)


def _append_url(urls: str | None, label: str, url: str) -> str:
    label = label.replace("]", "").replace("[", "")
    entry = f"[{label}] {url}"
    return entry if urls is None else f"{urls}\n{entry}"


def markup_strip(text: str) -> str:
    """Remove all tags and unquote the supported entities."""
    return _unquote(_strip_delimited(text, "<", ">"))


def markup_strip_a(text: str) -> tuple[str, str | None]:
    """Replace hyperlinks by their text.

    Returns the new text and the found links as newline separated
    "[text] href" lines, or None if no link had a href attribute.
    """
    urls: str | None = None
    while (tag1 := text.find("<a")) != -1:
        href = text.find('href="', tag1)
        tag1_end = text.find(">", tag1)
        tag2 = text.find("</a>", tag1)

        if tag1_end == -1:
            _log.warning("Given link is broken: '%s'", text[tag1:])
            text = text[:tag1]
            break
        if tag2 != -1 and tag2 < tag1_end:
            end = tag2 + len("</a>")
            _log.warning("Given link is broken: '%s.'", text[tag1:end])
            text = text[:tag1] + text[end:]
            break

        plain_url = None
        if href != -1 and href < tag1_end:
            href += len('href="')
            quote = text.find('"', href)
            if quote != -1 and quote < tag1_end:
                plain_url = text[href:quote]

        if tag2 != -1:
            link_text = text[tag1_end + 1:tag2]
            end = tag2 + len("</a>")
        else:
            link_text = text[tag1_end + 1:]
            end = len(text)

        text = text[:tag1] + link_text + text[end:]

        if plain_url is not None:
            urls = _append_url(urls, link_text, plain_url)

    return text, urls


def _attribute(text: str, start: int, name: str) -> tuple[int | None, int | None]:
    """Return the value's start and closing quote positions of an attribute."""
    pos = text.find(name, start)
    if pos == -1:
        return None, None
    value_start = pos + len(name)
    value_end = text.find('"', value_start)
    return value_start, (value_end if value_end != -1 else None)


def markup_strip_img(text: str) -> tuple[str, str | None]:
    """Replace img tags by their alt text or "[image]".

    Returns the new text and the found sources as newline separated
    "[alt] src" lines, or None if no valid src attribute was found.
    """
    urls: str | None = None
    while (start := text.find("<img")) != -1:
        end = text.find(">", start)
        if end == -1:
            _log.warning("Given image is broken: '%s'", text[start:])
            text = text[:start]
            break

        alt_s, alt_e = _attribute(text, start, _ALT)
        src_s, src_e = _attribute(text, start, _SRC)

        text_alt: str | None = None
        text_src: str | None = None

        if (alt_s is not None and alt_e is not None
                and src_s is not None and src_e is not None
                and ((alt_s < src_s and alt_e < src_s - len(_SRC) and src_e < end)
                     or (src_s < alt_s and src_e < alt_s - len(_ALT) and alt_e < end))):
            text_alt = text[alt_s:alt_e]
            text_src = text[src_s:src_e]
        elif (alt_s is not None and alt_e is not None and alt_e < end
              and (src_s is None or src_s < alt_s or alt_e < src_s - len(_SRC))):
            text_alt = text[alt_s:alt_e]
        elif (src_s is not None and src_e is not None and src_e < end
              and (alt_s is None or alt_s < src_s or src_e < alt_s - len(_ALT))):
            text_src = text[src_s:src_e]
        else:
            _log.warning("Given image argument is broken: '%s'", text[start:end])

        if text_alt is None:
            text_alt = "[image]"

        text = text[:start] + text_alt + text[end + 1:]

        if text_src is not None:
            urls = _append_url(urls, text_alt, text_src)

    return text, urls


def _is_entity(text: str, pos: int) -> bool:
    """Tell whether the '&' at pos starts a valid, supported entity."""
    end = text.find(";", pos)
    if end == -1:
        return False

    if text[pos + 1:pos + 2] == "#":
        cur = pos + 2
        digits = string.digits
        if text[cur:cur + 1] == "x":
            cur += 1
            digits = string.hexdigits
        if text[cur:cur + 1] == ";":
            return False
        while cur < end and text[cur] in digits:
            cur += 1
        return cur == end

    return any(text.startswith(entity, pos) for entity in _SUPPORTED_ENTITIES)


def _escape_unsupported(text: str) -> str:
    pos = 0
    while (pos := text.find("&", pos)) != -1:
        if _is_entity(text, pos):
            pos += 1
        else:
            text = text[:pos] + "&amp;" + text[pos + 1:]
            pos += len("&amp;")
    return text


def markup_transform(text: str, mode: MarkupMode, ignore_newline: bool = False) -> str:
    """Transform text according to the markup mode and newline setting."""
    if mode is MarkupMode.NO:
        text = _quote(text)
    elif mode is MarkupMode.STRIP:
        text = _quote(markup_strip(_br2nl(text)))
    elif mode is MarkupMode.FULL:
        text = _br2nl(_escape_unsupported(text))
        text, _ = markup_strip_a(text)
        text, _ = markup_strip_img(text)
    else:
        raise ValueError(f"invalid markup mode: {mode!r}")

    if ignore_newline:
        text = text.replace("\n", " ")
    return text