"""
CSS styles for ndevtop.
"""

from .constants import HEADER_HEIGHT
from .models import ColorTheme, THEME


def get_monitor_css(theme: ColorTheme = THEME) -> str:
    """Generate CSS for the monitor screen using theme colors."""
    return f"""
Screen {{
    background: {theme.background};
}}

#ndev-container {{
    height: 1fr;
    padding: 0 1;
}}

#ndev-header {{
    height: {HEADER_HEIGHT};
    color: {theme.text};
}}

#prompt-row {{
    height: 1;
}}

#prompt-label {{
    width: auto;
    color: {theme.warning};
}}

#prompt {{
    height: 1;
    width: 1fr;
    border: none;
    padding: 0;
    background: {theme.background};
}}

#prompt:focus {{
    border: none;
}}

#device-table {{
    height: 1fr;
    background: {theme.surface};
    border: solid {theme.border};
}}
"""
