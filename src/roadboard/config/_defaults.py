"""Built-in default configuration values.

DEFAULT_CONFIG is a plain dict so it can be passed straight to deep_merge,
which never mutates its inputs.
"""

from typing import Any

DEFAULT_CONFIG: dict[str, Any] = {  # pyright: ignore[reportExplicitAny]
    "logging": {
        "level": "info",
        "format": "json",
        "file": "",
    },
    "board": {
        "data_file": "roadmap-data.json",
        "locale": "en",
        "suggestion_limit": 10,
        "description_max_length": 300,
    },
}
