# Module: Win32 window lock helpers (repaint suppression + scroll position keep).
# Main: lock_window_update_block, lock_window_and_keep_scroll_position, lock_widget_and_keep_scroll_position.
# Example: from intrect.core.win32 import lock_widget_and_keep_scroll_position

import ctypes
import sys
from typing import Callable, TypeVar

T = TypeVar("T")

_user32 = None

WM_USER = 0x400
EM_GETSCROLLPOS = WM_USER + 221
EM_SETSCROLLPOS = WM_USER + 222


def _is_windows() -> bool:
    return sys.platform.startswith("win")


# ---------- Win32 bindings (ctypes, no pywin32) ----------
if _is_windows():
    from ctypes import wintypes

    _user32 = ctypes.WinDLL("user32", use_last_error=True)

    _user32.LockWindowUpdate.argtypes = [wintypes.HWND]
    _user32.LockWindowUpdate.restype = wintypes.BOOL

    _user32.SendMessageW.argtypes = [wintypes.HWND, wintypes.UINT, wintypes.WPARAM, ctypes.POINTER(wintypes.POINT)]
    _user32.SendMessageW.restype = ctypes.c_ssize_t


def widget_hwnd(widget) -> int:
    # winId() forces Qt to create the native window
    return int(widget.winId())


def lock_window_update_block(hwnd: int, action: Callable[[], T]) -> T:
    """Run action while the window does not repaint; the lock is always released."""
    if not _is_windows() or not hwnd:
        return action()
    try:
        _user32.LockWindowUpdate(wintypes.HWND(int(hwnd)))
        return action()
    finally:
        _user32.LockWindowUpdate(None)


def lock_window_and_keep_scroll_position(hwnd: int, action: Callable[[], T]) -> T:
    if not _is_windows() or not hwnd:
        return action()

    def run() -> T:
        h = wintypes.HWND(int(hwnd))
        scroll = wintypes.POINT(0, 0)
        _user32.SendMessageW(h, EM_GETSCROLLPOS, 0, ctypes.byref(scroll))
        try:
            return action()
        finally:
            _user32.SendMessageW(h, EM_SETSCROLLPOS, 0, ctypes.byref(scroll))

    return lock_window_update_block(hwnd, run)


def _scroll_bars(widget) -> list:
    bars = []
    for name in ("horizontalScrollBar", "verticalScrollBar"):
        getter = getattr(widget, name, None)
        if getter is None:
            continue
        bar = getter()
        if bar is not None:
            bars.append(bar)
    return bars


def lock_widget_and_keep_scroll_position(widget, action: Callable[[], T]) -> T:
    """Qt entry point: native lock on Windows, updates off + scroll bar restore elsewhere."""
    if _is_windows():
        return lock_window_and_keep_scroll_position(widget_hwnd(widget), action)

    bars = _scroll_bars(widget)
    saved = [bar.value() for bar in bars]
    widget.setUpdatesEnabled(False)
    try:
        return action()
    finally:
        for bar, value in zip(bars, saved):
            bar.setValue(value)
        widget.setUpdatesEnabled(True)
