"""nl-shell: a natural language shell for *NIX systems."""

from .constants import APP_VERSION as __version__
