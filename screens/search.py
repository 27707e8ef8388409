from kivy.uix.boxlayout import BoxLayout
from kivy.uix.textinput import TextInput
from kivy.clock import Clock
from ui.widgets import RoundedButton as Button
from models.actions import DismissSearch, UpdateSearchQuery


class SearchOverlay:
    def _build_search_bar(self):
        self.search_bar = BoxLayout(size_hint=(1, None), height=0, opacity=0, spacing=8, padding=(16, 6))
        self.search_input = TextInput(hint_text="Search...", multiline=False, font_size=26, size_hint=(1, 1))
        self.search_clear_btn = Button(text="x", size_hint=(None, 1), width=64, font_size=24,
                                       background_color=self.theme["surface"])
        self.search_bar.add_widget(self.search_input)
        self.search_bar.add_widget(self.search_clear_btn)

        self._pending_query = None
        self.search_input.bind(text=lambda inst, val: self._debounced_query(val))
        self.search_input.bind(on_text_validate=lambda *_: setattr(self.search_input, "focus", False))
        self.search_clear_btn.bind(on_release=self._on_search_clear)
        return self.search_bar

    def _debounced_query(self, text: str):
        if self._pending_query:
            self._pending_query.cancel()
        if not self.store.state.is_search_active:
            return
        self._pending_query = Clock.schedule_once(
            lambda dt: self.store.dispatch(UpdateSearchQuery(text)),
            self.config["search"]["debounce_seconds"],
        )

    def _on_search_clear(self, *_):
        if self.search_input.text:
            # clear the text only, search stays open
            self.search_input.text = ""
            if self._pending_query:
                self._pending_query.cancel()
            self.store.dispatch(UpdateSearchQuery(""))
        else:
            self.store.dispatch(DismissSearch())
            self.search_input.focus = False

    def _focus_search_field(self, *_):
        # runs on the next frame, after the Searching state has been rendered
        Clock.schedule_once(lambda dt: setattr(self.search_input, "focus", True), 0)

    def _render_search_bar(self, state):
        active = state.is_search_active
        self.search_bar.height = 72 if active else 0
        self.search_bar.opacity = 1 if active else 0
        self.search_bar.disabled = not active
        self.search_input.hint_text = state.current_tab.search_placeholder
        if not active:
            if self._pending_query:
                self._pending_query.cancel()
                self._pending_query = None
            if self.search_input.text:
                self.search_input.text = ""
            self.search_input.focus = False
