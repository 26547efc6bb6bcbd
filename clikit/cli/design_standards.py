"""clikit CLI Design Standards.

Visual standards shared by the console, the spinner and the commands.
"""

# Color palette
COLORS = {
    'primary': '#3B82F6',          # Headers, branding (bright blue)
    'success': '#10B981',          # Success lines (green)
    'warning': '#F59E0B',          # Attention items (yellow)
    'error': '#EF4444',            # Failures (red)
    'info': '#06B6D4',             # Informational lines (cyan)
    'muted': '#6B7280',            # Secondary text (gray)
    'spinner': 'cyan',             # Spinner glyph
    'spinner.message': 'yellow',   # Spinner status text
}

# Layout standards
LAYOUT = {
    'terminal_width': 120,
    'json_indent': 2,
}

# Status symbols
SYMBOLS = {
    'pass': '✓',          # Success indicator
    'fail': '✗',          # Failure indicator
    'info_text': 'INFO',
}

# Braille spinner frames, drawn in order and wrapped
SPINNER_FRAMES = ('⠋', '⠙', '⠹', '⠸', '⠼', '⠴', '⠦', '⠧', '⠇', '⠏')
