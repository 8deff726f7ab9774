"""Banner rendering."""

from __future__ import annotations

from datetime import date

from .models import ConfigError


def render_banner(template: str, name: str, when: date) -> str:
    """Render a banner template.

    The template may reference ``{name}`` and ``{date}``; the date is
    formatted as ``yyyy-mm-dd``. Literal braces are written doubled.

    Examples:
        >>> render_banner("/*! {name} {date} */\\n", "mypkg", date(2024, 1, 1))
        '/*! mypkg 2024-01-01 */\\n'
    """
    try:
        return template.format_map({"name": name, "date": when.isoformat()})
    except KeyError as e:
        raise ConfigError(f"Unknown banner placeholder: {e.args[0]}") from None
    except (ValueError, IndexError) as e:
        raise ConfigError(f"Malformed banner template: {e}") from None
