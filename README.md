# minirt

Supporting pieces for a small ray tracer, in pure Python with no
dependencies: reading scene text, looking up colour names, drawing into
in-memory images and windows, and running callbacks from an event loop.

## What is inside

- `minirt.textio`
  - `LineReader(stream, buffer_size=10)` reads a text or binary stream in
    fixed-size chunks. `read_line()` returns one line with its trailing
    newline, or `None` at the end. The reader is also iterable.
  - `read_lines(stream)` yields every line of a stream.
  - `parse_int(text)` reads a leading integer. It skips leading blanks and
    takes one optional sign. Text without digits gives 0. On overflow it
    gives -1 for a positive number and 0 for a negative one.
  - `compare_prefix(first, second, n)` compares at most `n` leading bytes.
    It returns 0 or the difference of the first differing byte values.
- `minirt.wordtab`
  - `split_words(text)` splits on spaces and tabs.
  - `find_substring(text, needle, length)` finds a substring.
    `find_unquoted(text, needle, length)` finds one outside double quotes.
    Both return -1 when there is no match or when the needle is longer than
    `length`.
- `minirt.colors`
  - `lookup_color(name)` returns the `0xRRGGBB` value of an X11 colour name.
    `"none"` gives -1 and an unknown name raises `KeyError`.
  - `color_names()` lists every name once, in database order.
- `minirt.display`
  - `PixelFormat.from_masks(red_mask, green_mask, blue_mask, depth)` describes
    a true-colour pixel layout. `convert(color)` packs a `0xRRGGBB` colour into
    that layout. Depths of 24 and above keep the colour unchanged.
  - `Image(width, height)` is a 32-bit image whose pixel bytes are in `data`,
    little-endian, with `size_line` bytes per row. It has `put_pixel` and
    `get_pixel`, and both raise `IndexError` outside the image.
  - `Canvas(width, height)` is a black drawing surface.
    - `pixel_put` clips points that fall outside it.
    - `get_pixel` raises `IndexError` outside it.
    - `put_image(image, x, y)` copies an image onto it, with clipping.
    - `clear()` resets it to black.
- `minirt.events`
  - `Window` owns a `Canvas` and keeps one hook per `EventType`:
    - `hook(event_type, mask, callback)` registers any hook.
    - `key_hook` is called with the keysym when a key is released.
    - `mouse_hook` is called with `(button, x, y)` when a button is pressed.
    - `expose_hook` is called with no arguments when the window is exposed.
    - `event_mask()` returns the union of the hooks' masks.
    - `dispatch(event)` passes an `Event` to the matching hook.
  - `EventLoop` keeps the open windows and a queue of events:
    - `new_window` opens a window and queues its first expose event.
    - `destroy_window`, `post`, `flush` (discards pending events and returns
      how many), `loop_hook` and `end`.
    - `run()` delivers events until `end()` is called or every window is
      closed. Without a loop hook it also stops once the queue is empty.

## Example

```python
from minirt.colors import lookup_color
from minirt.events import Event, EventLoop, EventType

loop = EventLoop()
window = loop.new_window(320, 180, "demo")

window.expose_hook(lambda: window.canvas.pixel_put(10, 10, lookup_color("red")))
window.key_hook(lambda keysym: loop.end())

loop.post(Event(EventType.KEY_RELEASE, window, keysym=53))
loop.run()

assert window.canvas.get_pixel(10, 10) == 0xFF0000
```

## What it does not do

The package does not trace rays or render scenes. It has no vector maths,
camera, ray–object intersection or scene-file parser. It also has no
command to run.

Windows and canvases exist only in memory. Nothing is shown on screen, and
events reach a window only when they are posted to the `EventLoop`.

## Running the tests

```
pip install -e ".[test]"
pytest
```