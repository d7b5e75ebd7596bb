"""Usage, help and version texts of the fractal explorer."""

from __future__ import annotations

_BANNER = "\nfractoscope -- Fractal explorer program\n\n"

_OPTIONS = (
    ("-h, --help", "Print this help and exit"),
    ("-v, --version", "Print version and licence information"),
    ("-d, --downsample N", "Render at 1/N resolution first (default: 1)"),
    ("--kernel ID", "Kernel used for the first render (default: 0)"),
    ("-o, --oversampling N", "Extra samples per pixel when upsampling (default: 1)"),
)

_CONTROLS = (
    ("Left mouse", "Drag to pan the camera"),
    ("Arrow keys", "Pan the camera while the selector is hidden"),
    ("Mouse wheel", "Zoom around the pointer"),
    ("'+' / '-'", "Zoom around the centre of the view"),
    ("Right mouse", "Pick the Julia parameter under the pointer"),
    ("[R]", "Render the current view"),
    ("[U]", "Upsample the last render"),
    ("[T]", "Render again only pixels left at the default colour"),
    ("[Q]", "Raise the iteration limit"),
    ("[A]", "Lower the iteration limit"),
    ("[S]", "Show or hide the selector (switches arrow key panning)"),
    ("[F]", "Pick random gradient colours"),
    ("[Z]", "Save the image to 'screenshot.ppm'"),
)


def _table(rows: tuple[tuple[str, str], ...]) -> str:
    width = max(len(key) for key, _ in rows) + 2
    return "".join(f"  {key.ljust(width)}{text}\n" for key, text in rows)


def usage_text(program: str) -> str:
    """One-line usage for ``program``."""
    return f"Usage: {program} [opts...] WIN_WIDTH WIN_HEIGHT\n"


def help_text(program: str) -> str:
    """Full help: banner, usage, options and controls."""
    return (
        _BANNER
        + usage_text(program)
        + "\nOptions:\n"
        + _table(_OPTIONS)
        + "\nControls:\n"
        + _table(_CONTROLS)
    )


def version_text() -> str:
    """Program version information."""
    return (
        _BANNER
        + "version: 1.0\n\n"
        + "Free software: you may change it and pass it on.\n"
        + "It comes without any warranty, as far as the law allows.\n"
    )