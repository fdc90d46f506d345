"""App Kivy con la lista de signos vitales."""

from __future__ import annotations

import logging
from datetime import datetime

from dateutil import tz

from vitals_screen.catalog import SCREEN_TITLE, VITAL_DATA
from vitals_screen.config import ScreenConfig
from vitals_screen.markup import (
    ACCENT_COLORS,
    SECONDARY_COLOR,
    escape_markup,
    to_markup,
)
from vitals_screen.screen import (
    LayoutStyle,
    VitalItem,
    build_items,
    layout_for,
    platform_from_kivy,
)

_LOG = logging.getLogger(__name__)

_CARD_RADIUS = 10
_CARD_SPACING = 10


def run_app(config: ScreenConfig) -> int:
    """Lanza la app Kivy."""
    from kivy.app import App
    from kivy.graphics import Color, Rectangle, RoundedRectangle
    from kivy.uix.behaviors import ButtonBehavior
    from kivy.uix.boxlayout import BoxLayout
    from kivy.uix.gridlayout import GridLayout
    from kivy.uix.label import Label
    from kivy.uix.scrollview import ScrollView
    from kivy.utils import get_color_from_hex, platform

    target = config.platform or platform_from_kivy(platform)
    layout = layout_for(target)
    _LOG.info(
        "platform=%s layout=%s locale=%s", target.value, layout.value, config.locale
    )

    def make_label(text: str, **kwargs: object) -> Label:
        label = Label(text=text, markup=True, **kwargs)
        if config.font_path:
            label.font_name = config.font_path
        label.bind(size=lambda widget, size: setattr(widget, "text_size", size))
        return label

    class VitalItemView(ButtonBehavior, BoxLayout):
        """One vital: header row plus the styled value."""

        def __init__(self, item: VitalItem, **kwargs: object) -> None:
            super().__init__(
                orientation="vertical",
                spacing=20,
                padding=16,
                size_hint_y=None,
                height=120,
                **kwargs,
            )
            self.item = item
            if layout is LayoutStyle.CARDS:
                with self.canvas.before:
                    Color(1, 1, 1, 1)
                    self._bg = RoundedRectangle(radius=[_CARD_RADIUS])
                self.bind(pos=self._sync_bg, size=self._sync_bg)

            header = BoxLayout(orientation="horizontal", size_hint_y=None, height=24)
            accent = ACCENT_COLORS[item.accent_color]
            header.add_widget(
                make_label(
                    f"[b][color={accent}]{escape_markup(item.title)}[/color][/b]",
                    halign="left",
                    valign="middle",
                )
            )
            header.add_widget(
                make_label(
                    f"[color={SECONDARY_COLOR}]"
                    f"{escape_markup(item.observed_label)}[/color]",
                    halign="right",
                    valign="middle",
                    shorten=True,
                    shorten_from="right",
                )
            )
            if item.show_chevron:
                header.add_widget(
                    make_label(
                        f"[b][color={SECONDARY_COLOR}]›[/color][/b]",
                        size_hint_x=None,
                        width=16,
                    )
                )
            self.add_widget(header)
            self.add_widget(
                make_label(to_markup(item.value), halign="left", valign="bottom")
            )

        def _sync_bg(self, *_args: object) -> None:
            self._bg.pos = self.pos
            self._bg.size = self.size

        def on_release(self) -> None:
            # No detail destination for a vital.
            _LOG.debug("selected vital %s (%s)", self.item.identity, self.item.title)

    class VitalsApp(App):
        """Main Kivy app."""

        def build(self) -> BoxLayout:
            self.title = SCREEN_TITLE
            now = datetime.now(tz=tz.gettz(config.time_zone))
            items = build_items(
                VITAL_DATA, locale=config.locale, now=now, layout=layout
            )

            root = BoxLayout(orientation="vertical")
            with root.canvas.before:
                Color(*get_color_from_hex("#f2f2f7"))
                bg = Rectangle()
            root.bind(
                pos=lambda widget, pos: setattr(bg, "pos", pos),
                size=lambda widget, size: setattr(bg, "size", size),
            )
            root.add_widget(
                make_label(
                    f"[size=32sp][b][color=#000000]{escape_markup(SCREEN_TITLE)}"
                    "[/color][/b][/size]",
                    size_hint_y=None,
                    height=64,
                    halign="left",
                    valign="middle",
                    padding=(16, 0),
                )
            )

            spacing = _CARD_SPACING if layout is LayoutStyle.CARDS else 1
            grid = GridLayout(
                cols=1,
                spacing=spacing,
                padding=(spacing, 0),
                size_hint_y=None,
            )
            grid.bind(minimum_height=grid.setter("height"))
            for item in items:
                grid.add_widget(VitalItemView(item))
            scroll = ScrollView()
            scroll.add_widget(grid)
            root.add_widget(scroll)
            return root

    VitalsApp().run()
    return 0
