"""
pi_grid — two-section text layout inside fixed terminal viewports.

A DrawProcess owns a rectangle split by a divider; text grows up from the
divider in the minus section and down from it in the plus section, and
rendering yields positioned draw instructions for a pluggable driver.
"""
from .actions import Action, MoveTo, Print
from .drivers import Canvas, LineCollector, OutToString, RenderDriver, SafeRenderDriver, TerminalDriver
from .errors import GridError, LayoutError, NoSpaceError, RenderContractError
from .layout import Layout, LayoutDocument, build_layout, load_layout, parse_layout
from .process import DrawProcess
from .settings import LayoutSettings, load_settings
from .terminal import BufferTerminal, ProcessTerminal, Terminal
from .text import pad_to_width, truncate_to_width, visible_width, wrap_text
from .trim import Ignore, SplitLines, TrimmedText, TrimStrategy, Truncate, Wrap, get_trim_strategy
from .viewport import DividerStrategy, Side, Viewport

__all__ = [
    # actions
    "Action",
    "MoveTo",
    "Print",
    # drivers
    "Canvas",
    "LineCollector",
    "OutToString",
    "RenderDriver",
    "SafeRenderDriver",
    "TerminalDriver",
    # errors
    "GridError",
    "LayoutError",
    "NoSpaceError",
    "RenderContractError",
    # layout
    "Layout",
    "LayoutDocument",
    "build_layout",
    "load_layout",
    "parse_layout",
    # process
    "DrawProcess",
    # settings
    "LayoutSettings",
    "load_settings",
    # terminal
    "BufferTerminal",
    "ProcessTerminal",
    "Terminal",
    # text
    "pad_to_width",
    "truncate_to_width",
    "visible_width",
    "wrap_text",
    # trim
    "Ignore",
    "SplitLines",
    "TrimmedText",
    "TrimStrategy",
    "Truncate",
    "Wrap",
    "get_trim_strategy",
    # viewport
    "DividerStrategy",
    "Side",
    "Viewport",
]
