"""Shared constants for the splitter layout engine."""

# Splitter thickness in pixels; padding, margins and minimum panel size
# are derived from it (see core.geometry.SplitterMetrics)
SPLITTER_SIZE = 6

# Layout description tags
TAG_WINDOW = "W"
TAG_VERTICAL = "V"
TAG_HORIZONTAL = "H"
OPEN_BRACE = "{"
CLOSE_BRACE = "}"
SEPARATOR = ":"

# Demo layout: eight windows in nested vertical/horizontal splits
DEMO_LAYOUT = "V{H{V{W{1}:W{2}}:H{W{3}:V{W{4}:W{5}}}}:V{W{6}:H{W{7}:W{8}}}}"
DEFAULT_WIDTH = 1280
DEFAULT_HEIGHT = 800
