"""Color palettes for the browser chrome and how one is chosen.

Themes are UI-only ANSI palettes (list/header/footer/modals). Syntax
highlighting style for generated commands remains a separate setting.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reset: str
    reverse: str
    title: str
    tab_active: str
    tab_inactive: str
    cursor_marker: str
    method_get: str
    method_post: str
    method_put: str
    method_delete: str
    method_other: str
    path: str
    summary: str
    component_kind: str
    detail: str
    indicator: str
    empty: str
    search_prompt: str
    search_query: str
    search_placeholder: str
    hint_key: str
    hint_dim: str
    help_heading: str
    modal_title: str
    modal_border: str
    backdrop: str

    def method(self, method: str) -> str:
        """Return the color for an HTTP method label."""
        return {
            "GET": self.method_get,
            "POST": self.method_post,
            "PUT": self.method_put,
            "PATCH": self.method_put,
            "DELETE": self.method_delete,
        }.get(method.upper(), self.method_other)


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    reverse="\033[7m",
    title="\033[1;38;5;45m",
    tab_active="\033[1;38;5;81m",
    tab_inactive="\033[2;38;5;250m",
    cursor_marker="\033[38;5;44m",
    method_get="\033[1;38;5;42m",
    method_post="\033[1;38;5;214m",
    method_put="\033[1;38;5;81m",
    method_delete="\033[1;38;5;203m",
    method_other="\033[1;38;5;250m",
    path="\033[38;5;252m",
    summary="\033[2;38;5;250m",
    component_kind="\033[38;5;109m",
    detail="\033[38;5;250m",
    indicator="\033[2;38;5;250m",
    empty="\033[2;38;5;250m",
    search_prompt="\033[1;38;5;81m",
    search_query="\033[1;38;5;229m",
    search_placeholder="\033[2;38;5;250m",
    hint_key="\033[38;5;229m",
    hint_dim="\033[2;38;5;250m",
    help_heading="\033[1;38;5;81m",
    modal_title="\033[1;38;5;45m",
    modal_border="\033[38;5;45m",
    backdrop="\033[2m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    reverse="\033[7m",
    title="\033[1;38;5;39m",
    tab_active="\033[1;38;5;45m",
    tab_inactive="\033[2;38;5;110m",
    cursor_marker="\033[38;5;39m",
    method_get="\033[1;38;5;84m",
    method_post="\033[1;38;5;215m",
    method_put="\033[1;38;5;117m",
    method_delete="\033[1;38;5;210m",
    method_other="\033[1;38;5;153m",
    path="\033[38;5;153m",
    summary="\033[2;38;5;110m",
    component_kind="\033[38;5;73m",
    detail="\033[38;5;152m",
    indicator="\033[2;38;5;110m",
    empty="\033[2;38;5;110m",
    search_prompt="\033[1;38;5;45m",
    search_query="\033[1;38;5;153m",
    search_placeholder="\033[2;38;5;110m",
    hint_key="\033[38;5;153m",
    hint_dim="\033[2;38;5;110m",
    help_heading="\033[1;38;5;45m",
    modal_title="\033[1;38;5;39m",
    modal_border="\033[38;5;39m",
    backdrop="\033[2;38;5;24m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    reverse="",
    title="",
    tab_active="",
    tab_inactive="",
    cursor_marker="",
    method_get="",
    method_post="",
    method_put="",
    method_delete="",
    method_other="",
    path="",
    summary="",
    component_kind="",
    detail="",
    indicator="",
    empty="",
    search_prompt="",
    search_query="",
    search_placeholder="",
    hint_key="",
    hint_dim="",
    help_heading="",
    modal_title="",
    modal_border="",
    backdrop="",
)

_THEMES: dict[str, UITheme] = {theme.name: theme for theme in (DEFAULT_THEME, OCEAN_THEME)}


def available_theme_names() -> tuple[str, ...]:
    """Names accepted by ``--theme`` and the ``theme`` config key."""
    return tuple(sorted(_THEMES))


def normalize_theme_name(name: str | None) -> str:
    """Map ``name`` to a known theme; unknown or empty names become ``default``."""
    candidate = (name or "").strip().lower()
    return candidate if candidate in _THEMES else DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return the palette to draw with; ``no_color`` always selects the plain one."""
    return PLAIN_THEME if no_color else _THEMES[normalize_theme_name(name)]


__all__ = [
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "UITheme",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
