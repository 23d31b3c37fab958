"""raylib compatibility layer over the native raylib/pyray C bindings.

Imports from raylib (CamelCase CFFI bindings) or pyray (snake_case) and
re-exports a single snake_case surface with UTF-8 encoding helpers, so the
rest of the game never cares which binding is installed.
"""
from __future__ import annotations

try:
    from raylib import *  # type: ignore
except Exception:
    try:
        from pyray import *  # type: ignore
    except Exception as exc:
        raise ImportError(
            "Could not import raylib bindings. Install 'raylib' or 'pyray'."
        ) from exc

# Some bindings expose Color/Vector2 as structs, others use plain tuples.
if "Color" not in globals():
    def Color(r: int, g: int, b: int, a: int):  # type: ignore
        return (r, g, b, a)

if "Vector2" not in globals():
    def Vector2(x: float, y: float):  # type: ignore
        return (x, y)

if "Rectangle" not in globals():
    def Rectangle(x: float, y: float, width: float, height: float):  # type: ignore
        return (x, y, width, height)

# Map the snake_case names used by the game to CamelCase raylib bindings if needed.
_CAMEL_MAP = {
    "init_window": "InitWindow",
    "set_target_fps": "SetTargetFPS",
    "window_should_close": "WindowShouldClose",
    "begin_drawing": "BeginDrawing",
    "clear_background": "ClearBackground",
    "end_drawing": "EndDrawing",
    "close_window": "CloseWindow",
    "get_time": "GetTime",
    "set_exit_key": "SetExitKey",
    "get_mouse_position": "GetMousePosition",
    "is_mouse_button_pressed": "IsMouseButtonPressed",
    "is_key_pressed": "IsKeyPressed",
    "get_char_pressed": "GetCharPressed",
    "draw_text": "DrawText",
    "measure_text": "MeasureText",
    "draw_rectangle": "DrawRectangle",
    "draw_rectangle_pro": "DrawRectanglePro",
    "draw_circle_v": "DrawCircleV",
    "draw_circle_gradient": "DrawCircleGradient",
    "draw_circle_lines": "DrawCircleLines",
}

for _snake, _camel in _CAMEL_MAP.items():
    if _snake not in globals() and _camel in globals():
        globals()[_snake] = globals()[_camel]

if "MOUSE_BUTTON_LEFT" not in globals():
    MOUSE_BUTTON_LEFT = 0  # type: ignore


def _encode_text(value):  # type: ignore
    if isinstance(value, str):
        return value.encode("utf-8")
    return value


# Wrap functions that expect const char*
if "init_window" in globals():
    _init_window = globals()["init_window"]
    def init_window(width, height, title):  # type: ignore
        return _init_window(width, height, _encode_text(title))
    globals()["init_window"] = init_window

if "draw_text" in globals():
    _draw_text = globals()["draw_text"]
    def draw_text(text, x, y, size, color):  # type: ignore
        return _draw_text(_encode_text(text), int(x), int(y), size, color)
    globals()["draw_text"] = draw_text

if "measure_text" in globals():
    _measure_text = globals()["measure_text"]
    def measure_text(text, size):  # type: ignore
        return _measure_text(_encode_text(text), size)
    globals()["measure_text"] = measure_text
else:
    def measure_text(text, size):  # type: ignore
        return int(len(str(text)) * size * 0.6)
    globals()["measure_text"] = measure_text

# DrawCircleGradient and DrawCircleLines take integer centres
if "draw_circle_gradient" in globals():
    _draw_circle_gradient = globals()["draw_circle_gradient"]
    def draw_circle_gradient(x, y, radius, inner, outer):  # type: ignore
        return _draw_circle_gradient(int(x), int(y), float(radius), inner, outer)
    globals()["draw_circle_gradient"] = draw_circle_gradient

if "draw_circle_lines" in globals():
    _draw_circle_lines = globals()["draw_circle_lines"]
    def draw_circle_lines(x, y, radius, color):  # type: ignore
        return _draw_circle_lines(int(x), int(y), float(radius), color)
    globals()["draw_circle_lines"] = draw_circle_lines
