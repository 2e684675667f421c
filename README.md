# dunstkit

Building blocks of a lightweight desktop notification daemon, usable on
their own from Python code.

## Modules

- `dunstkit.log` – log levels and their names. `LogLevel` lists the levels
  from `ERROR` (most severe) to `DEBUG`. `set_level_from_string` accepts
  `critical`/`crit`, `warning`/`warn`, `message`/`mesg`, `info` and
  `debug`/`deb`, case-insensitively; `None` changes nothing and an unknown
  name is logged as a warning. `level_to_string`, `set_level` and
  `get_level` complete the set. `log_init(testing)` installs a handler on
  the `dunstkit` logger that prints `LEVEL: message` for records at or above
  the current level (warnings and worse to stderr, the rest to stdout);
  with `testing` true it prints nothing.
- `dunstkit.markup` – turning notification text into renderable text
  according to a `MarkupMode` (`NO`, `STRIP`, `FULL`):
  - `markup_strip(text)` removes all tags and unquotes `&amp;`, `&lt;`,
    `&gt;`, `&quot;` and `&apos;`.
  - `markup_strip_a(text)` replaces `<a>` tags by their text and returns
    `(text, urls)`, where `urls` holds `[text] href` lines, or `None`.
  - `markup_strip_img(text)` replaces `<img>` tags by their `alt` text or
    `[image]` and returns `(text, urls)` with `[alt] src` lines, or `None`.
  - `markup_transform(text, mode, ignore_newline=False)` quotes (`NO`),
    strips and quotes (`STRIP`), or escapes unsupported entities and
    removes links and images (`FULL`); `<br>` tags become newlines, and
    with `ignore_newline` newlines become spaces. `MarkupMode.NULL` raises
    `ValueError`.
- `dunstkit.icon` – icons as Pillow images:
  - `get_image_from_file(filename)` loads an image, expanding a leading
    `~`; it returns `None` on failure.
  - `get_image_from_icon(iconname, icon_path)` accepts a `file://` URI, an
    absolute path, or a name searched in the `:`-separated folders of
    `icon_path`, trying `.svg`, `.png` and `.xpm` in that order.
  - `icon_get_for_name(name, icon_path)` returns `(image, name)` or `None`.
  - `icon_get_for_data(data)` builds an image from the raw image-data tuple
    `(width, height, rowstride, has_alpha, bits_per_sample, n_channels,
    bytes)` and returns `(image, md5_of_unpadded_pixels)`, or `None` if the
    data is invalid. Only 8 bits per sample with RGB or RGBA is accepted.
  - `icon_scale(image, max_icon_size)` shrinks an image so that its larger
    side fits; `0` disables scaling.
  - `image_to_cairo_data(image)` returns premultiplied ARGB32 (or opaque
    RGB24) pixel data in native byte order.
- `dunstkit.status` – the daemon's status: `StatusField`, the immutable
  `DunstStatus` (`fullscreen`, `running`, `idle`), `StatusTracker` with
  `set(field, value)` and `get()`, and `version_message(version)`.
- `dunstkit.dunstify` – parsing of a notification client's command line:
  `parse_commandline(argv=None)` returns `DunstifyOptions` and raises
  `ValueError` for an invalid command line or a missing summary;
  `parse_urgency`, `parse_action` (`"action,label"`) and `parse_hint`
  (`"type:name:value"` with type `int`, `double`, `string` or `byte`,
  giving a `Hint`) handle the single values. Malformed actions and hints
  given on the command line are reported on stderr and skipped.

## Examples

```python
from dunstkit.markup import MarkupMode, markup_strip, markup_strip_a, markup_transform

markup_strip("&amp;quot;")
# '&quot;'

markup_transform("<i>foo</i><br>bar\nbaz", MarkupMode.STRIP)
# 'foo\nbar\nbaz'

markup_transform("<i>foo</i><br>bar\nbaz", MarkupMode.FULL, ignore_newline=True)
# '<i>foo</i> bar baz'

markup_strip_a('<a href="https://example.com">valid</a> link')
# ('valid link', '[valid] https://example.com')
```

```python
from dunstkit.log import get_level, level_to_string, set_level_from_string

set_level_from_string("deb")
level_to_string(get_level())
# 'DEBUG'
```

```python
from dunstkit.dunstify import Urgency, parse_commandline, parse_hint

options = parse_commandline(["-u", "critical", "Summary", "Body"])
options.urgency is Urgency.CRITICAL
# True

parse_hint("int:volume:42")
# Hint(kind='int', name='volume', value=42)
```

## What this package does not do

It contains no running daemon: it does not connect to a message bus, serve
or decode notification requests, queue notifications, or draw anything on
screen. `dunstkit.dunstify` only parses a command line; it does not send
notifications, and the package installs no commands.

## Running the tests

Install the `test` extra and run pytest from the project directory.